"""Aspect-ratio preserving destination size."""

from loguru import logger

from ..common.schemas import U32_MAX


def resolve_height(
    src_width: int,
    src_height: int,
    dst_width: int,
    explicit_height: int | None = None,
) -> int:
    """
    Compute the destination height for a resize to ``dst_width``.

    An explicit height is returned unchanged. Otherwise the source aspect
    ratio is kept: ``floor(dst_width * src_height / src_width)``. The result
    is never below 1; degenerate inputs and results that do not fit in an
    unsigned 32-bit integer also resolve to 1.
    """
    if explicit_height is not None:
        return explicit_height

    if src_width == 0 or src_height == 0 or dst_width == 0:
        return 1

    height = dst_width * src_height // src_width
    if height > U32_MAX:
        logger.warning(
            f"Resolved height {height} for {src_width}x{src_height} -> width {dst_width} "
            + "exceeds 32 bits, clamping to 1"
        )
        return 1

    return max(height, 1)
