"""Keep a vendored VulkanMemoryAllocator header in sync with upstream."""

__version__ = "0.1.0"
