from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InlinerConfig:
    pretty_print: bool = False
    remove_style_tags: bool = False  # drop <style> elements once their rules are read
    http_timeout: float = 10.0  # seconds, for external stylesheets
    host: str = "127.0.0.1"
    port: int = 5000
