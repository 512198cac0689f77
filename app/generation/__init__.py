from app.generation.factory import GeneratorFactory
from app.generation.generator import ReportGenerator

__all__ = ["GeneratorFactory", "ReportGenerator"]
