from .hours_viewmodel import (
    AlignmentVM,
    DivineTimingViewModel,
    HourVM,
    WindowVM,
)
