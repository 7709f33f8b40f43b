"""Azure IoT Upload Models

This package provides object models for use with the Azure IoT Upload client.
"""

from .x509 import X509  # noqa: F401
from .proxy_options import ProxyOptions  # noqa: F401
from .upload_result import BlobUploadResult  # noqa: F401
