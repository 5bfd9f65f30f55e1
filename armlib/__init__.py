"""
armlib: the shared json, mapping, logging and configuration layer of arm-models.
"""

__title__ = "armlib"
__description__ = "Shared library for Azure Resource Manager data models."
__author__ = "arm-models contributors"
__license__ = "Apache 2.0"
__version__ = "0.4.0"
