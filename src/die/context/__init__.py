from .output_capture import OutputBuffer, SysOutputCapture, sys_output_capture

__all__ = [
    "OutputBuffer",
    "SysOutputCapture",
    "sys_output_capture",
]
