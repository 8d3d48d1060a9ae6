from robotsedit.infrastructure.document_io import load_document, save_document

__all__ = [
    "load_document",
    "save_document",
]
