import argparse
from .CustomTypes import ClassifierConfig, DisplayToggles, RenderConfig, DEFAULT_THRESHOLD, DEFAULT_REFERENCE_WHITE
from ..Observer.SpectralLocus import SpectralLocus, DEFAULT_LOCUS


def AddRenderArgs(parser):
    parser.add_argument('--width', type=int, required=False, default=900, help='Raster width in pixels')
    parser.add_argument('--height', type=int, required=False, default=720, help='Raster height in pixels')
    parser.add_argument('--padding', type=float, required=False, default=0.02,
                        help='Chromaticity margin around the points when auto-zooming')


def AddClassifierArgs(parser):
    parser.add_argument('--threshold', type=float, required=False, default=DEFAULT_THRESHOLD,
                        help='Max distance to the spectral locus for a spectral classification')
    parser.add_argument('--white_x', type=float, required=False, default=DEFAULT_REFERENCE_WHITE[0],
                        help='Reference white x')
    parser.add_argument('--white_y', type=float, required=False, default=DEFAULT_REFERENCE_WHITE[1],
                        help='Reference white y')
    parser.add_argument('--locus', type=str, required=False, default='table', choices=['table', 'cmfs'],
                        help='Fixed approximate locus table, or one built from the CIE 1931 CMFS')


def AddDisplayArgs(parser):
    # Each toggle can be switched either way, defaults match DisplayToggles()
    parser.add_argument('--fill', action=argparse.BooleanOptionalAction, default=False, help='Fill polygons')
    parser.add_argument('--points', action=argparse.BooleanOptionalAction, default=True, help='Show points')
    parser.add_argument('--borders', action=argparse.BooleanOptionalAction, default=True, help='Show borders')
    parser.add_argument('--centroids', action=argparse.BooleanOptionalAction, default=True, help='Show centroids')
    parser.add_argument('--wavelengths', action=argparse.BooleanOptionalAction, default=True,
                        help='Label points and centroids with wavelength and purity')


def AddOutputArgs(parser):
    parser.add_argument("--output_png", type=str, required=False, help="Write the rendered diagram to this PNG file")
    parser.add_argument("--output_uri", type=str, required=False,
                        help="Write the rendered diagram as a base64 PNG data URI to this text file")
    parser.add_argument("--output_csv", type=str, required=False, help="Write the classification table to this CSV file")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")


def RenderConfigFromArgs(args) -> RenderConfig:
    return RenderConfig(width=args.width, height=args.height, padding=args.padding)


def ClassifierConfigFromArgs(args) -> ClassifierConfig:
    return ClassifierConfig(threshold=args.threshold, reference_white=(args.white_x, args.white_y))


def LocusFromArgs(args) -> SpectralLocus:
    if args.locus == 'cmfs':
        return SpectralLocus.from_cmfs()
    return DEFAULT_LOCUS


def DisplayTogglesFromArgs(args) -> DisplayToggles:
    return DisplayToggles(fill_polygons=args.fill, show_points=args.points, show_borders=args.borders,
                          show_centroids=args.centroids, show_wavelengths=args.wavelengths)
