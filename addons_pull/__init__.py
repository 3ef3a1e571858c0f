"""Mirror the ScratchAddons repository into a bundler-friendly build tree."""

__version__ = "0.1.0"
