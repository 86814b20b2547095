from .models import ParamType, Parameter, PlacementObject

__all__ = ["ParamType", "Parameter", "PlacementObject"]
