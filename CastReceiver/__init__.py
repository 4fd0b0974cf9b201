# 12.10.26

__title__ = "CastReceiver"
__version__ = "1.0.0"
