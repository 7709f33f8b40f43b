# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import threading
import logging

logger = logging.getLogger(__name__)


class EventedCallback(object):
    """
    A callback for FileUploadApi operations whose completion can be waited upon.

    Pass an instance as the callback of .request_credential() or .notify_upload_complete(), then
    call .wait_for_completion() to block until the operation is complete. It returns the
    credential for .request_credential(), and None for .notify_upload_complete().
    """

    def __init__(self):
        self._completed = threading.Event()
        self._error = None
        self._result = None

    def __call__(self, error=None, result=None):
        """
        Complete the operation.

        :param error: The error the operation failed with, if any
        :param result: The result of the operation, if it has one
        """
        if self._completed.is_set():
            logger.warning("Callback invoked after completion, ignoring")
            return

        self._error = error
        self._result = result
        if error:
            logger.debug("Operation completed with error {}".format(error))
        else:
            logger.debug("Operation completed successfully")
        self._completed.set()

    @property
    def completed(self):
        return self._completed.is_set()

    def wait_for_completion(self, timeout=None):
        """
        Wait for the operation to complete, and return its result.

        :param float timeout: Number of seconds to wait (optional). Waits forever if not given.

        :returns: The result the operation completed with
        :raises: The error the operation completed with, if any
        :raises: TimeoutError if the operation did not complete within the timeout
        """
        if not self._completed.wait(timeout):
            raise TimeoutError("Operation did not complete within {} seconds".format(timeout))

        if self._error:
            raise self._error
        return self._result
