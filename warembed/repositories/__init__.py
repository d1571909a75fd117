from .build_descriptor_repository import BuildDescriptorRepository

__all__ = [
    'BuildDescriptorRepository'
]
