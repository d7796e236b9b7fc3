# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models for the UCode SDK.

- :class:`~ucode_sdk.models.argument.Request`: generic JSON payload container.
- :class:`~ucode_sdk.models.argument.Argument`: per-call argument carrying a table slug.
- :class:`~ucode_sdk.models.argument.ArgumentWithPagination`: argument with ``limit``/``page``.
- :class:`~ucode_sdk.models.relation.ManyToManyRelation`: many-to-many relation descriptor.
"""

__all__ = []
