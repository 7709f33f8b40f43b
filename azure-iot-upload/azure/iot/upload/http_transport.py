# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import logging
import ssl
import requests  # type: ignore
from . import exceptions
from . import http_map_error
from . import http_thread

logger = logging.getLogger(__name__)


# NOTE: There should probably be a more global timeout configuration, but for now this will do.
HTTP_TIMEOUT = 10

_SUPPORTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


class HTTPRequest(object):
    """
    A request built by the HTTPTransport. The body is written with .write(), and the request is
    sent when .end() is called.
    """

    def __init__(self, transport, method, path, headers, host, x509_opts, done):
        self._transport = transport
        self.method = method
        self.path = path
        self.headers = headers
        self.host = host
        self.x509_opts = x509_opts
        self.done = done
        self._chunks = []

    def write(self, data):
        """Add data to the body of the request

        :param data: Body content
        :type data: str or bytes
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._chunks.append(data)

    def end(self):
        """Send the request.

        :returns: A Future that completes once the completion callback has been invoked
        :rtype: :class:`concurrent.futures.Future`
        """
        return self._transport.send(self)

    @property
    def body(self):
        return b"".join(self._chunks)


class HTTPTransport(object):
    """
    A wrapper class that provides an implementation-agnostic HTTP interface.
    """

    def __init__(
        self,
        server_verification_cert=None,
        cipher=None,
        proxy_options=None,
        timeout=HTTP_TIMEOUT,
    ):
        """
        Constructor to instantiate an HTTP protocol wrapper.

        :param str server_verification_cert: Certificate which can be used to validate a server-side TLS connection (optional).
        :param str cipher: Cipher string in OpenSSL cipher list format (optional)
        :param proxy_options: Options for sending traffic through proxy servers.
        :type proxy_options: :class:`azure.iot.upload.models.ProxyOptions`
        :param int timeout: Number of seconds to wait for the server to respond (default 10)
        """
        self._server_verification_cert = server_verification_cert
        self._cipher = cipher
        self._proxies = format_proxies(proxy_options)
        self._timeout = timeout

    def build_request(self, method, path, headers, host, x509_opts, done):
        """
        Build a request that will be sent once its .end() method is called.

        :param str method: The request method (e.g. "POST")
        :param str path: The path for the URL, including any query string
        :param dict headers: HTTP headers to be sent with the request.
        :param str host: Hostname or IP address of the remote host.
        :param x509_opts: Certificate which can be used to authenticate the connection to the
            server in lieu of a password (optional).
        :type x509_opts: :class:`azure.iot.upload.models.X509`
        :param Function done: The function that gets called when the request is complete or has
            failed. It is called with the keyword arguments error, body and response.

        :returns: The request object
        :rtype: :class:`HTTPRequest`
        """
        return HTTPRequest(
            transport=self,
            method=method,
            path=path,
            headers=headers,
            host=host,
            x509_opts=x509_opts,
            done=done,
        )

    def _create_http_adapter(self, x509_cert):
        """
        This method creates a custom HTTPAdapter for use with a requests library session.
        It will allow for use of a custom configured SSL context.
        """
        ssl_context = self._create_ssl_context(x509_cert)

        class CustomSSLContextHTTPAdapter(requests.adapters.HTTPAdapter):
            def init_poolmanager(self, *args, **kwargs):
                kwargs["ssl_context"] = ssl_context
                return super().init_poolmanager(*args, **kwargs)

            def proxy_manager_for(self, *args, **kwargs):
                kwargs["ssl_context"] = ssl_context
                return super().proxy_manager_for(*args, **kwargs)

        return CustomSSLContextHTTPAdapter()

    def _create_ssl_context(self, x509_cert):
        """
        This method creates the SSLContext object used to authenticate the connection. The generated context is used by the http_client and is necessary when authenticating using a self-signed X509 cert or trusted X509 cert
        """
        logger.debug("creating a SSL context")
        ssl_context = ssl.SSLContext(protocol=ssl.PROTOCOL_TLSv1_2)

        if self._server_verification_cert:
            ssl_context.load_verify_locations(cadata=self._server_verification_cert)
        else:
            ssl_context.load_default_certs()

        if self._cipher:
            ssl_context.set_ciphers(self._cipher)

        if x509_cert is not None:
            logger.debug("configuring SSL context with client-side certificate and key")
            ssl_context.load_cert_chain(
                x509_cert.certificate_file,
                x509_cert.key_file,
                x509_cert.pass_phrase,
            )

        ssl_context.verify_mode = ssl.CERT_REQUIRED
        ssl_context.check_hostname = True

        return ssl_context

    @http_thread.invoke_on_http_thread_nowait
    def send(self, request):
        """
        This method creates a connection to a remote host, sends a request to that host, and then
        waits for and reads the response from that request. The completion callback of the
        request is invoked exactly once.

        :param request: The request to send
        :type request: :class:`HTTPRequest`
        """
        logger.info("sending https {} request to {} .".format(request.method, request.path))

        url = "https://{hostname}{path}".format(hostname=request.host, path=request.path)
        headers = {key: str(value) for (key, value) in request.headers.items()}

        error = None
        response = None
        try:
            if request.method not in _SUPPORTED_METHODS:
                raise ValueError("Invalid method type: {}".format(request.method))

            # Mount the transport adapter to a requests session
            session = requests.Session()
            session.mount("https://", self._create_http_adapter(request.x509_opts))

            # Note that TLS configuration is not set here due to it being set
            # via the HTTPAdapter that was mounted at session level.
            response = session.request(
                request.method,
                url,
                data=request.body,
                headers=headers,
                proxies=self._proxies,
                timeout=self._timeout,
            )
        except ValueError as e:
            # Allow ValueError to propagate
            error = e
        except requests.exceptions.Timeout as e:
            # Allow Timeout to propagate
            # NOTE: This breaks the convention of only exposing exceptions defined in this
            # package. However, there is no timeout support at the client level to map it to.
            error = e
        except Exception as e:
            new_err = exceptions.ProtocolClientError("Unexpected HTTPS failure during request")
            new_err.__cause__ = e
            error = new_err

        if error:
            logger.error("{} request to {} failed: {}".format(request.method, request.path, error))
            request.done(error=error, body=None, response=None)
        elif response.status_code >= 300:
            logger.error(
                "{} request to {} returned status {}".format(
                    request.method, request.path, response.status_code
                )
            )
            service_error = http_map_error.translate_error(response.status_code, response.reason)
            request.done(error=service_error, body=response.text, response=response)
        else:
            logger.debug(
                "{} request to {} returned status {}".format(
                    request.method, request.path, response.status_code
                )
            )
            request.done(error=None, body=response.text, response=response)


def format_proxies(proxy_options):
    """
    Format the data from the proxy_options object into a format for use with the requests library
    """
    proxies = {}
    if proxy_options:
        # Basic address/port formatting
        proxy = "{address}:{port}".format(
            address=proxy_options.proxy_address, port=proxy_options.proxy_port
        )
        # Add credentials if necessary
        if proxy_options.proxy_username and proxy_options.proxy_password:
            auth = "{username}:{password}".format(
                username=proxy_options.proxy_username, password=proxy_options.proxy_password
            )
            proxy = auth + "@" + proxy
        # Set proxy for use on HTTP or HTTPS connections
        if proxy_options.proxy_type == "HTTP":
            proxies["http"] = "http://" + proxy
            proxies["https"] = "http://" + proxy
        elif proxy_options.proxy_type == "SOCKS4":
            proxies["http"] = "socks4://" + proxy
            proxies["https"] = "socks4://" + proxy
        elif proxy_options.proxy_type == "SOCKS5":
            proxies["http"] = "socks5://" + proxy
            proxies["https"] = "socks5://" + proxy
        else:
            # This should be unreachable due to validation on the ProxyOptions object
            raise ValueError("Invalid proxy type: {}".format(proxy_options.proxy_type))

    return proxies
