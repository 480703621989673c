# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Browse a remote media catalog as a tree of opaque, paginated nodes."""

__version__ = "0.1.0"
