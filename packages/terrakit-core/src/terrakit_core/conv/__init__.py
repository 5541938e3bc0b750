from .slices import interface_slice_to_int_slice, interface_slice_to_string_slice

__all__ = ["interface_slice_to_int_slice", "interface_slice_to_string_slice"]
