"""Data model, colours, layout and viewer state for neutral-atom visualizations."""

__version__ = "0.4.1"