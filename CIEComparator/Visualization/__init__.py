from .Raster import RasterizeBackground, RasterizeBackgroundImage, BackgroundFactory
from .Overlay import DrawOverlay, DrawFrame, FILL_PALETTE, BORDER_PALETTE
