import argparse

from CIEComparator import ChromaticityDiagram, DefaultPointSets
from CIEComparator.Utils.ImageUtils import ImageToDataURI
from CIEComparator.Utils.IO import LoadPointSets
from CIEComparator.Utils.LoggingConfig import setup_logging
from CIEComparator.Utils.ParserOptions import *


def main():
    parser = argparse.ArgumentParser(description='Compare chromaticity point sets on the CIE 1931 diagram')
    parser.add_argument('--sets', type=str, required=False,
                        help='JSON file with [{"name": ..., "points": [[x, y], ...]}, ...]. '
                             'Uses two seed LED sets if omitted.')
    AddRenderArgs(parser)
    AddClassifierArgs(parser)
    AddDisplayArgs(parser)
    AddOutputArgs(parser)
    args = parser.parse_args()

    logger = setup_logging(args.verbose)

    point_sets = LoadPointSets(args.sets) if args.sets else DefaultPointSets()
    locus = LocusFromArgs(args)
    logger.info(f"Spectral locus ({args.locus}): {len(locus)} samples, "
                f"{locus.wavelengths[0]}-{locus.wavelengths[-1]}nm")
    diagram = ChromaticityDiagram(RenderConfigFromArgs(args), ClassifierConfigFromArgs(args), locus)

    for summary in diagram.wavelength_ranges(point_sets):
        logger.info(f"{summary.set_name}: {summary.describe()}")
    for point_set, centroid, classification, purity in diagram.centroids(point_sets):
        logger.info(f"{point_set.name} centroid ({centroid.x:.4f}, {centroid.y:.4f}): "
                    f"{classification.wavelength}, purity {purity:.3f}")

    if args.output_png or args.output_uri:
        image = diagram.render(point_sets, DisplayTogglesFromArgs(args))
        if args.output_png:
            diagram.export_png(image, args.output_png)
        if args.output_uri:
            with open(args.output_uri, 'w') as f:
                f.write(ImageToDataURI(image))
            logger.info(f"Wrote data URI to {args.output_uri}")
    if args.output_csv:
        diagram.export_csv(point_sets, args.output_csv)
    if not (args.output_png or args.output_uri or args.output_csv):
        print(diagram.classification_table(point_sets).to_string(index=False))


if __name__ == "__main__":
    main()
