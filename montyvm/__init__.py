"""An interpreter for Monty bytecode: a stack/queue machine, its line interpreter and the ``monty`` command."""

__version__ = "0.1.0"
__all__ = ["__version__"]