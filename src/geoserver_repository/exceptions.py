# -*- coding: utf-8 -*-
#########################################################################
#
# Copyright 2019, GeoSolutions Sas.
# All rights reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE.txt file in the root directory of this source tree.
#
#########################################################################


class FailedRequestError(Exception):
    """
    A request to the GeoServer REST API failed, either because the server
    answered with an unexpected status code or because the transport failed.
    """

    def __init__(self, message, status_code=None, body=None):
        super(FailedRequestError, self).__init__(message)
        self.status_code = status_code
        self.body = body


class RequestTimeoutError(FailedRequestError):
    pass


class ConflictingDataError(Exception):
    pass


class InvalidConfigurationError(ValueError):
    pass


class UnknownResourceTypeError(ValueError):
    pass
