"""ASGI entrypoint for the photo marketplace API."""

from photo_marketplace.api.app import create_app
from photo_marketplace.containers import build_container

app = create_app(build_container())
