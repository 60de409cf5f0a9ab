"""Project and solution descriptor generation."""

from .generator import DescriptorGenerator, GenerationResult

__all__ = ["DescriptorGenerator", "GenerationResult"]
