# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import functools
import logging
import threading
from concurrent.futures import ThreadPoolExecutor

logger = logging.getLogger(__name__)

"""
This module contains decorators that are used to marshal HTTP requests onto a background
thread, known as the "http thread".

1. All HTTP requests sent by the default transport execute in a single thread. The
  `invoke_on_http_thread_nowait` decorator causes the decorated function to run on that thread
  without blocking the caller.

2. If the http thread is busy running a request, the next one is queued until the first is
  complete.

3. Completion callbacks into user code are invoked from the http thread. Exceptions they raise
  cannot be caught by the code which made the request, so they are logged by
  `handle_background_exception` instead of being lost.

4. The decorated function returns a concurrent.futures.Future, which can be used to wait for
  the request to complete (tests use this).
"""

HTTP_THREAD_NAME = "azure_iot_http"

_executors = {}


def _get_named_executor(thread_name):
    """
    Get a ThreadPoolExecutor object with the given name.  If no such executor exists,
    this function will create on with a single worker and assign it to the provided
    name.
    """
    global _executors
    if thread_name not in _executors:
        logger.debug("Creating {} executor".format(thread_name))
        _executors[thread_name] = ThreadPoolExecutor(max_workers=1)
    return _executors[thread_name]


def handle_background_exception(e):
    """
    Function which handles exceptions that are caught in the http thread.  These exceptions
    need special handling because there's nobody else to catch them.

    :param Error e: Exception object raised from inside a background thread
    """
    logger.error(msg="Exception caught in background thread.  Unable to handle.", exc_info=e)


def _invoke_on_executor_thread_nowait(func, thread_name):
    """
    Return wrapper to run the function on a given thread. The call returns immediately without
    waiting for the decorated function to complete.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if threading.current_thread().name != thread_name:
            logger.debug("Starting {} in {} thread".format(func.__name__, thread_name))

            def thread_proc():
                threading.current_thread().name = thread_name
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    handle_background_exception(e)
                except BaseException:
                    logger.error("Unhandled exception in background thread")
                    logger.error(
                        "This may cause the background thread to abort and may result in system instability."
                    )
                    raise

            return _get_named_executor(thread_name).submit(thread_proc)
        else:
            logger.debug("Already in {} thread for {}".format(thread_name, func.__name__))
            return func(*args, **kwargs)

    return wrapper


def invoke_on_http_thread_nowait(func):
    """
    Run the decorated function on the http thread, but don't wait for it to complete
    """
    return _invoke_on_executor_thread_nowait(func=func, thread_name=HTTP_THREAD_NAME)
