"""Schema families, one sub-package per classification.

Each sub-package ships a ``__domain__.py`` manifest picked up by
:meth:`finreport.domains.registry.ClassificationRegistry.auto_discover`.
"""
