"""Reading and validation of .cub scene files, with frame buffers and texture loading."""

__version__ = "0.1.0"