from .loader import SceneLoader
from .models import InstanceBatch, ObjectFailure, SceneLoadReport

__all__ = ["SceneLoader", "SceneLoadReport", "InstanceBatch", "ObjectFailure"]
