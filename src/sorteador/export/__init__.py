from .service import ClipboardExportService

__all__ = ["ClipboardExportService"]
