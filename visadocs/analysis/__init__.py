from visadocs.analysis.analyzer import DocumentAnalyzer
from visadocs.analysis.base import BaseAnalyzer
from visadocs.analysis.factory import AnalyzerFactory

__all__ = ["AnalyzerFactory", "BaseAnalyzer", "DocumentAnalyzer"]
