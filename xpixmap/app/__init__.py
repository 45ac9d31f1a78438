from .convert import ConvertSettings, Converter, SUPPORTED_EXTENSIONS
from .snippets import format_snippet

__all__ = ["ConvertSettings", "Converter", "format_snippet", "SUPPORTED_EXTENSIONS"]
