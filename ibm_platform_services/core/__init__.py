"""Request building, validation and transport shared by all service clients.

Architecture:
- validators.py: required-parameter checks
- descriptors.py: static per-endpoint request metadata
- builder.py: descriptor + parameters -> RequestDescriptor
- client.py: requests-based transport returning futures
- service.py: façade construction and operation dispatch
- exceptions.py: typed exceptions for error handling
"""
