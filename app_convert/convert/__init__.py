"""
Legacy app conversion.

This package renders a legacy app definition into the file-per-step layout:
one module per trigger, search and write, an index module and a package.json.

Modules:
- fields: Input field and sample result rendering
- steps: Single step module rendering
- index: Index module rendering
- package: package.json rendering
- converter: Whole-app conversion onto disk
"""
