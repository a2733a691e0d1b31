"""ASGI entrypoint: ``uvicorn nutrition_diary.api.asgi:app``."""

from nutrition_diary.api.app import create_app
from nutrition_diary.containers import build_container

container = build_container()
app = create_app(container)
