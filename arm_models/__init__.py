__title__ = "arm-models"
__description__ = "Azure Resource Manager control plane data models."
__author__ = "arm-models contributors"
__license__ = "Apache 2.0"
__version__ = "0.4.0"
