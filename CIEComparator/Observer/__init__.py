from .SpectralLocus import SpectralLocus, SPECTRAL_LOCUS, DEFAULT_LOCUS
