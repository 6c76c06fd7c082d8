"""
Synthesizers - emit TypeScript source for the normalized schema.

Each synthesizer writes one part of the generated file through the
shared TextWriter held by the GenerationContext:

1. ModuleSynthesizer: file preamble and the enclosing module
2. FactorySynthesizer: create/update functions per node kind
3. VisitorSynthesizer: fallback and accept dispatch functions
"""

from __future__ import annotations

from .base import GenerationContext, Synthesizer
from .factory import FactorySynthesizer
from .module import ModuleSynthesizer
from .visitor import DispatchGroup, VisitorSynthesizer, partition_dispatch_groups

__all__ = [
    "DispatchGroup",
    "FactorySynthesizer",
    "GenerationContext",
    "ModuleSynthesizer",
    "Synthesizer",
    "VisitorSynthesizer",
    "partition_dispatch_groups",
]
