from sassvars.transforms.imports import (
    Bindings,
    SassImportTransform,
    StylesheetImport,
    is_stylesheet_import,
)


def apply_imports(importer, requests, lookup=None):
    """Resolve every stylesheet import in *requests* for one importing file."""
    transform = SassImportTransform(lookup)
    bindings: Bindings = {}
    for request in requests:
        bindings.update(transform.apply(importer, request))
    return bindings


__all__ = [
    "Bindings",
    "SassImportTransform",
    "StylesheetImport",
    "apply_imports",
    "is_stylesheet_import",
]
