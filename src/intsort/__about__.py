__title__ = "intsort"
__version__ = "0.1.0"
__author__ = "Logan S"
