from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.project_builder import ProjectBuilder

SAMPLE_HEADER = """\
/** \\mainpage Vulkan Memory Allocator

<b>Version 3.2.0 </b>

Copyright (c) 2017-2024 Advanced Micro Devices, Inc.
*/

#if VMA_VULKAN_VERSION >= 1003000 // VK_VERSION_1_3
#elif VMA_VULKAN_VERSION >= 1001000 // VK_VERSION_1_1
#endif
// VK_VERSION_1_2
"""

SAMPLE_README = """\
# Vulkan Memory Allocator C++ bindings

| VMA | Vulkan | Revision |
| --- | --- | --- |
| <!--VER-->3.0.1<!--/VER--> | <!--VK-->1.2<!--/VK--> | <!--REV-->[old](https://example.com/old) <!--/REV--> |
"""


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def sample_header() -> str:
    return SAMPLE_HEADER


@pytest.fixture
def sample_readme() -> str:
    return SAMPLE_README
