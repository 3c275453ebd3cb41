"""verrange version information.

Read by the CLI ``--version`` option and by the package metadata.
"""

__version__ = "0.1.0"
