from paraphraser.api import (
    paraphrase_routes,
    ui_routes,
)

__all__ = [
    "paraphrase_routes",
    "ui_routes",
]
