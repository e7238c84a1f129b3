"""
app-convert: legacy app definition converter.

Converts a legacy declarative app definition (triggers, searches and actions
with typed input fields) into the file-per-step source layout of the newer
platform: one JavaScript module per step, an index module registering them
all, and a package.json.

Main features:
- Field type and step category mapping
- Visible placeholders for missing or short help text
- Sample result rendering
- Concurrent rendering and writing of all output files
"""

__version__ = "0.1.0"
