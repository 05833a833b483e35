"""End-to-end conversion pipeline."""

from __future__ import annotations

import logging

from . import ConversionOutcome, ConversionSettings, Frame, FrameMode, FrameRect
from . import emitter, image_loader, metadata, packer
from ..utils import streams, validators

logger = logging.getLogger(__name__)


def convert(settings: ConversionSettings) -> ConversionOutcome:
    """Read the image (and metadata), pack every frame and write the source.

    The output is rendered in memory first so that nothing is written unless
    every frame was decoded and validated.
    """

    validators.validate_settings(settings)

    spritesheet = None
    if settings.mode is FrameMode.MULTI:
        spritesheet = metadata.load_spritesheet(settings.metadata_path)

    with streams.open_input(settings.input_path) as handle:
        image = image_loader.decode_image(handle)

    if spritesheet is not None:
        frames = list(spritesheet.frames)
        if spritesheet.image:
            logger.info("Sprite sheet metadata describes image %s", spritesheet.image)
        validators.validate_uniform_frames(frames)
    else:
        frames = [Frame(name=settings.name, rect=FrameRect(0, 0, image.width, image.height))]

    bitmaps = [
        packer.build_bitmap(image, frame, index, settings.bit_order, settings.foreground)
        for index, frame in enumerate(frames)
    ]
    text = emitter.render_source(
        bitmaps,
        name=settings.name,
        mode=settings.mode,
        header_guard=settings.header_guard,
        progmem=settings.progmem,
    )

    with streams.open_output(settings.output_path) as out:
        out.write(text)

    first = bitmaps[0]
    logger.info(
        "Wrote %s frame(s) of %sx%s (%s bytes each) to %s",
        len(bitmaps),
        first.width,
        first.height,
        len(first.data),
        settings.output_path,
    )
    return ConversionOutcome(
        frame_count=len(bitmaps),
        frame_width=first.width,
        frame_height=first.height,
        bytes_per_frame=len(first.data),
        output_path=settings.output_path,
    )
