"""mcpack - CLI for scaffolding, inspecting and packaging Minecraft datapacks.

The package is split along the same boundaries as the commands it serves:

- **models/**: Manifest and summary types (PackManifest, NamespaceCounts)
- **persistence/**: JSON file I/O, pack path resolution, directory and zip listers
- **validation/**: Checks for user-provided settings before anything is written
- **commands/**: CLI command handlers orchestrating operations
- **errors**: Typed error hierarchy with user-facing messages
"""

__version__ = "0.1.0"
