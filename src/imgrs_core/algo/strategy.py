"""Mapping from ResizeAlgorithm to a concrete resampling strategy."""

from dataclasses import dataclass
from enum import StrEnum

from ..common.schemas import ResizeAlgorithm


class SamplingKind(StrEnum):
    NEAREST_NEIGHBOR = "nearest_neighbor"
    CONVOLUTION = "convolution"


class FilterKernel(StrEnum):
    BILINEAR = "bilinear"
    LANCZOS = "lanczos"


@dataclass(frozen=True)
class ResamplingStrategy:
    """What a Resampler should do: sample, or convolve with ``kernel``.

    ``support`` is the kernel radius in source pixels (0 for sampling).
    """

    kind: SamplingKind
    kernel: FilterKernel | None = None
    support: float = 0.0


NEAREST_NEIGHBOR = ResamplingStrategy(kind=SamplingKind.NEAREST_NEIGHBOR)
BILINEAR_CONVOLUTION = ResamplingStrategy(
    kind=SamplingKind.CONVOLUTION,
    kernel=FilterKernel.BILINEAR,
    support=1.0,
)
LANCZOS3_CONVOLUTION = ResamplingStrategy(
    kind=SamplingKind.CONVOLUTION,
    kernel=FilterKernel.LANCZOS,
    support=3.0,
)

_STRATEGIES: dict[ResizeAlgorithm, ResamplingStrategy] = {
    ResizeAlgorithm.NEAREST: NEAREST_NEIGHBOR,
    ResizeAlgorithm.BILINEAR: BILINEAR_CONVOLUTION,
    ResizeAlgorithm.LANCZOS3: LANCZOS3_CONVOLUTION,
}


def select_strategy(algorithm: ResizeAlgorithm | str) -> ResamplingStrategy:
    return _STRATEGIES[ResizeAlgorithm(algorithm)]
