"""Pixel grid transforms: sampling and resizing."""

from climg.transform.sampler import bilinear_sample
from climg.transform.resize import fit_size, resize_image

__all__ = ["bilinear_sample", "fit_size", "resize_image"]
