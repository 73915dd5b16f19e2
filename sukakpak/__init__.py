"""Core of a small rendering framework: assets, deferred freeing, meshes, events, shader metadata and a headless backend."""

__version__ = "0.1.0"