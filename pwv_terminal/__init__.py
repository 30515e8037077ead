"""PWV discovery terminal: a command engine over the blog-post entity corpus."""

__version__ = "0.1.0"
