"""
Transport adapters package.

Adapters convert the transport-agnostic response envelopes into the
response types of a concrete web framework.
"""

from __future__ import annotations
