"""Generate SadConsole font sprite sheets (.png + .font) from TTF/FON fonts."""

__version__ = "1.0.0"
