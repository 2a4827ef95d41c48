"""Turn-based grid battle of swordsmen and hunters, driven by command scripts."""

__version__ = "0.1.0"