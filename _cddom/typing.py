# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from _cddom.nodes import _ParentNode  # noqa: F401


InputStream: TypeAlias = "bytes | str"
"""The source of a document, its length can be limited with an explicit argument."""

_AttributesData: TypeAlias = "dict[str, str]"

ParentNodeType: TypeAlias = "_ParentNode"


__all__ = (
    "InputStream",
    "ParentNodeType",
)
