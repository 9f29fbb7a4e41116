# CIEComparator - compare chromaticity point sets on the CIE 1931 diagram
from .ChromaticityDiagram import ChromaticityDiagram, DefaultPointSets, DefaultPolygon
from .ColorMath.Classification import Classifier, ClassifyWavelength, ClassifyPurity
from .Observer import SpectralLocus, SPECTRAL_LOCUS, DEFAULT_LOCUS
from .Utils.CustomTypes import *
