from typing import List, Sequence, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont

from ..ColorMath.Classification import Classifier, FormatWavelengthLabel
from ..ColorMath.Geometry import ChromaticityTransform
from ..Utils.CustomTypes import DisplayToggles, PointSet


# Cycled by set index; a seventh set reuses entry 0
FILL_PALETTE: Tuple[str, ...] = ("blue", "red", "green", "orange", "purple", "brown")
BORDER_PALETTE: Tuple[str, ...] = ("darkblue", "darkred", "darkgreen", "darkorange", "purple", "saddlebrown")

FILL_ALPHA = 0.3
POINT_RADIUS = 6
CENTROID_ARM = 8
LINE_WIDTH = 2
LABEL_COLOR = "black"
LABEL_FONT_SIZE = 12
AXIS_FONT_SIZE = 14


def SetColor(index: int) -> Tuple[int, int, int]:
    return ImageColor.getrgb(FILL_PALETTE[index % len(FILL_PALETTE)])


def SetBorderColor(index: int) -> Tuple[int, int, int]:
    return ImageColor.getrgb(BORDER_PALETTE[index % len(BORDER_PALETTE)])


def _font(size: int) -> ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


def _fill_polygon(image: Image.Image, pixels: List[Tuple[int, int]], color: Tuple[int, int, int]):
    layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
    ImageDraw.Draw(layer).polygon(pixels, fill=color + (int(round(FILL_ALPHA * 255)),))
    image.alpha_composite(layer)


def _draw_border(draw: ImageDraw.ImageDraw, pixels: List[Tuple[int, int]], color: Tuple[int, int, int]):
    path = pixels + [pixels[0]] if len(pixels) >= 3 else pixels
    draw.line(path, fill=color, width=LINE_WIDTH, joint="curve")


def _draw_point(draw: ImageDraw.ImageDraw, cx: int, cy: int, color: Tuple[int, int, int]):
    bounding_box = [cx - POINT_RADIUS, cy - POINT_RADIUS, cx + POINT_RADIUS, cy + POINT_RADIUS]
    draw.ellipse(bounding_box, fill=color, outline="white", width=LINE_WIDTH)


def _draw_centroid(draw: ImageDraw.ImageDraw, cx: int, cy: int, color: Tuple[int, int, int]):
    a = CENTROID_ARM
    arms = [[(cx - a, cy - a), (cx + a, cy + a)], [(cx + a, cy - a), (cx - a, cy + a)]]
    # white halo under the colored cross keeps it visible on light backgrounds
    for arm in arms:
        draw.line(arm, fill="white", width=LINE_WIDTH + 2)
    for arm in arms:
        draw.line(arm, fill=color, width=LINE_WIDTH)


def DrawPointSet(image: Image.Image, index: int, point_set: PointSet, transform: ChromaticityTransform,
                 toggles: DisplayToggles, classifier: Classifier):
    """
    Draw one set's polygon, points and centroid with their labels onto image (RGBA, in place).

    :param image: RGBA raster to draw on
    :param index: position of the set, selects the palette entry
    :param point_set: the set to draw
    :param transform: chromaticity to pixel mapping of the current zoom window
    :param toggles: which layers to draw
    :param classifier: source of the wavelength and purity labels
    """
    points = point_set.points
    if len(points) < 1:
        return
    color = SetColor(index)
    pixels = [transform.point_to_pixel(p) for p in points]
    font = _font(LABEL_FONT_SIZE)

    if toggles.fill_polygons and len(points) >= 3:
        _fill_polygon(image, pixels, color)

    draw = ImageDraw.Draw(image)
    if toggles.show_borders and len(points) >= 2:
        _draw_border(draw, pixels, SetBorderColor(index))

    if toggles.show_points:
        for i, (p, (cx, cy)) in enumerate(zip(points, pixels)):
            _draw_point(draw, cx, cy, color)
            if toggles.show_wavelengths:
                label = FormatWavelengthLabel(classifier.classify(p.x, p.y), decimals=0)
                draw.text((cx + 8, cy - 4), PointSet.point_label(i), fill=LABEL_COLOR, font=font, anchor="ls")
                draw.text((cx + 8, cy + 10), label, fill=LABEL_COLOR, font=font, anchor="ls")

    if toggles.show_centroids:
        centroid, classification, purity = classifier.centroid_report(point_set)
        ccx, ccy = transform.point_to_pixel(centroid)
        _draw_centroid(draw, ccx, ccy, color)
        if toggles.show_wavelengths:
            draw.text((ccx + 10, ccy - 4), f"{point_set.name} Centroid", fill=LABEL_COLOR, font=font, anchor="ls")
            draw.text((ccx + 10, ccy + 12), FormatWavelengthLabel(classification, decimals=1),
                      fill=LABEL_COLOR, font=font, anchor="ls")
            draw.text((ccx + 10, ccy + 26), f"Purity: {purity:.3f}", fill=LABEL_COLOR, font=font, anchor="ls")


def DrawFrame(image: Image.Image):
    """Axis captions and a 2px black border around the whole raster."""
    width, height = image.size
    draw = ImageDraw.Draw(image)
    font = _font(AXIS_FONT_SIZE)
    draw.text((width - 50, height - 10), "CIE x", fill=LABEL_COLOR, font=font, anchor="ls")
    draw.text((10, 18), "CIE y", fill=LABEL_COLOR, font=font, anchor="ls")
    draw.rectangle([0, 0, width - 1, height - 1], outline="black", width=LINE_WIDTH)


def DrawOverlay(image: Image.Image, point_sets: Sequence[PointSet], transform: ChromaticityTransform,
                toggles: DisplayToggles, classifier: Classifier) -> Image.Image:
    """Draw every set in order, then the frame. Later sets paint over earlier ones.

    Args:
        image (Image.Image): RGBA background, modified in place
        point_sets (Sequence[PointSet]): sets in display order
        transform (ChromaticityTransform): the transform used to rasterize the background
        toggles (DisplayToggles): visible layers
        classifier (Classifier): wavelength / purity source for labels

    Returns:
        Image.Image: the same image, for chaining
    """
    if image.mode != "RGBA":
        raise ValueError(f"Overlay expects an RGBA raster, got {image.mode}")
    for index, point_set in enumerate(point_sets):
        DrawPointSet(image, index, point_set, transform, toggles, classifier)
    DrawFrame(image)
    return image
