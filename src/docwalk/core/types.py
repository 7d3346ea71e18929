"""Core type definitions."""

from typing import NewType
from uuid import UUID

# Node identifier, generated once per node and never reused
NodeId = NewType("NodeId", UUID)

# URL path built from breadcrumb segments (e.g., "guide/setup")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)
