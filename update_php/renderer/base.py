"""
Protocol Renderer — interface pluggable pour le rendu d'un ContentBundle.
"""
from typing import Protocol, runtime_checkable

from ..core.schemas import ContentBundle


@runtime_checkable
class Renderer(Protocol):
    def render(self, bundle: ContentBundle) -> str: ...
