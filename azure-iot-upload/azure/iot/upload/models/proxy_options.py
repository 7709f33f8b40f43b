# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""
This module represents proxy options to enable sending traffic through proxy servers.
"""
import socks

PROXY_TYPES = ["HTTP", "SOCKS4", "SOCKS5"]

# PySocks constants are accepted in place of the proxy type names
socks_constant_to_string_map = {socks.HTTP: "HTTP", socks.SOCKS4: "SOCKS4", socks.SOCKS5: "SOCKS5"}

DEFAULT_HTTP_PROXY_PORT = 8080
DEFAULT_SOCKS_PROXY_PORT = 1080


class ProxyOptions:
    """
    A class containing various options to send HTTP requests to IoTHub through proxy servers.
    """

    def __init__(
        self, proxy_type, proxy_addr, proxy_port=None, proxy_username=None, proxy_password=None
    ):
        """
        Initializer for proxy options.
        :param proxy_type: The type of the proxy server. This can be one of three possible
         choices: "HTTP", "SOCKS4", or "SOCKS5". The equivalent PySocks constants (socks.HTTP,
         socks.SOCKS4, socks.SOCKS5) are also accepted.
        :type proxy_type: str or int
        :param str proxy_addr: IP address or DNS name of proxy server
        :param int proxy_port: The port of the proxy server. Defaults to 1080 for socks and 8080
         for http.
        :param str proxy_username: (optional) username for the proxy server.
         If it is not provided, authentication will not be used (servers may accept
         unauthenticated requests).
        :param str proxy_password: (optional) The password for the username provided.
        """
        self._proxy_type = format_proxy_type(proxy_type)
        self._proxy_addr = proxy_addr
        if proxy_port is None:
            self._proxy_port = _derive_default_proxy_port(self._proxy_type)
        else:
            self._proxy_port = int(proxy_port)
        self._proxy_username = proxy_username
        self._proxy_password = proxy_password

    @property
    def proxy_type(self):
        return self._proxy_type

    @property
    def proxy_address(self):
        return self._proxy_addr

    @property
    def proxy_port(self):
        return self._proxy_port

    @property
    def proxy_username(self):
        return self._proxy_username

    @property
    def proxy_password(self):
        return self._proxy_password


def format_proxy_type(proxy_type):
    """Returns the name of the proxy type ("HTTP", "SOCKS4" or "SOCKS5")"""
    if proxy_type in PROXY_TYPES:
        return proxy_type
    try:
        return socks_constant_to_string_map[proxy_type]
    except (KeyError, TypeError):
        raise ValueError("Invalid Proxy Type")


def _derive_default_proxy_port(proxy_type):
    if proxy_type == "HTTP":
        return DEFAULT_HTTP_PROXY_PORT
    else:
        return DEFAULT_SOCKS_PROXY_PORT
