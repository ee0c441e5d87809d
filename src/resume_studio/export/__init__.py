"""Export the live preview as a paginated PDF or a print handoff."""
from resume_studio.export.engine import ExportEngine, ExportResult, ExportStatus
from resume_studio.export.filename import default_filename, ensure_extension
from resume_studio.export.pagination import PaginationMode, Placement, plan_fit, plan_tiles
from resume_studio.export.print_handoff import PrintHandoffExporter
from resume_studio.export.raster_pdf import RasterPdfExporter
from resume_studio.export.rasterizer import PyMuPDFRasterizer, RasterImage

__all__ = [
    "ExportEngine",
    "ExportResult",
    "ExportStatus",
    "PaginationMode",
    "Placement",
    "PrintHandoffExporter",
    "PyMuPDFRasterizer",
    "RasterImage",
    "RasterPdfExporter",
    "default_filename",
    "ensure_extension",
    "plan_fit",
    "plan_tiles",
]
