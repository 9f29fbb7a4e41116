import json
import logging
from typing import List, Sequence

import pandas as pd

from .CustomTypes import PointReport, PointSet
from ..ColorMath.Classification import ExportWavelengthValue

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["Set", "Point", "x", "y", "Wavelength", "Purity"]


def BuildClassificationTable(reports: Sequence[PointReport]) -> pd.DataFrame:
    """
    One row per classified point. Wavelength is the matched nm value or "Purple".

    :param reports: per point classification results in set and point order
    :return: DataFrame with columns Set, Point, x, y, Wavelength, Purity
    """
    rows = [[r.set_name, r.point_label, r.x, r.y, ExportWavelengthValue(r.classification), r.purity]
            for r in reports]
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def ExportClassificationsCSV(reports: Sequence[PointReport], filename: str) -> pd.DataFrame:
    """Write the classification table to filename (header plus one line per point)."""
    table = BuildClassificationTable(reports)
    table.to_csv(filename, index=False)
    logger.info(f"Exported {len(table)} classified points to {filename}")
    return table


def LoadPointSets(filename: str) -> List[PointSet]:
    """
    Load point sets from a JSON list of {"name": str, "points": [[x, y], ...]}.

    Args:
        filename (str): path of the JSON document

    Returns:
        List[PointSet]: the sets in file order
    """
    with open(filename, "r", encoding="utf-8") as f:
        document = json.load(f)
    if not isinstance(document, list):
        raise ValueError(f"Expected a list of point sets in {filename}")

    point_sets: List[PointSet] = []
    for i, entry in enumerate(document):
        try:
            name = str(entry.get("name", f"LED Set {i + 1}"))
            pairs = [(float(x), float(y)) for x, y in entry["points"]]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed point set at index {i} in {filename}: {e}") from e
        point_sets.append(PointSet.from_pairs(name, pairs))
    logger.info(f"Loaded {len(point_sets)} point sets from {filename}")
    return point_sets
