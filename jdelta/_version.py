# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

version_info = (0, 1, 0)

__version__ = ".".join(str(part) for part in version_info)
