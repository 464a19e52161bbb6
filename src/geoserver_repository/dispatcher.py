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

import base64
import logging
import threading
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter

from geoserver_repository.exceptions import FailedRequestError, RequestTimeoutError

logger = logging.getLogger("gsrepository.dispatcher")

DEFAULT_ACCEPT = "application/json"
DEFAULT_CONTENT_TYPE = "text/json"


class Dispatcher(object):
    """
    Issues the HTTP calls of the repository. Every request carries the basic
    auth credentials, the JSON content negotiation headers and the configured
    timeout; a failed attempt is never retried.
    """

    def __init__(self, service_url, username=None, password=None, timeout=5000):
        self.service_url = service_url
        self.username = username
        self.password = password
        # milliseconds
        self.timeout = timeout
        self.setup_connection()

    def __getstate__(self):
        '''http connections cannot be pickled'''
        state = dict(vars(self))
        state['_client'] = None
        state['_local'] = None
        return state

    def __setstate__(self, state):
        '''restore http connections upon unpickling'''
        self.__dict__.update(state)
        self.setup_connection()

    def setup_connection(self):
        self._client = None
        self._local = threading.local()

    def create_session(self):
        session = requests.session()
        parsed_url = urlparse(self.service_url)
        session.mount(f"{parsed_url.scheme}://", HTTPAdapter(max_retries=0))
        return session

    @property
    def client(self):
        '''
        The session requests go through. requests sessions are not thread
        safe, so each thread gets its own unless a client was assigned.
        '''
        if self._client is not None:
            return self._client
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = self.create_session()
        return session

    @client.setter
    def client(self, client):
        self._client = client

    def request_headers(self, content_type=None, headers=None):
        request_headers = {
            "Accept": DEFAULT_ACCEPT,
            "Content-type": content_type or DEFAULT_CONTENT_TYPE
        }
        if self.username and self.password:
            valid_uname_pw = base64.b64encode(
                f"{self.username}:{self.password}".encode("utf-8")).decode("ascii")
            request_headers['Authorization'] = f'Basic {valid_uname_pw}'
        if headers:
            request_headers.update(headers)
        return dict((k, v) for k, v in request_headers.items() if v is not None)

    def request(self, url, method="get", data=None, headers=None, content_type=None):
        if not url:
            raise ValueError("URL required")

        req_method = getattr(self.client, method.lower())
        request_headers = self.request_headers(content_type, headers)

        logger.debug(f"{method.upper()} {url}")
        try:
            return req_method(url, headers=request_headers, data=data, timeout=self.timeout / 1000.0)
        except requests.exceptions.Timeout as e:
            raise RequestTimeoutError(f"{method.upper()} {url} timed out after {self.timeout} ms") from e
        except requests.exceptions.RequestException as e:
            raise FailedRequestError(f"{method.upper()} {url} failed: {e}") from e

    def get(self, url, headers=None):
        return self.request(url, headers=headers)

    def post(self, url, data=None, headers=None, content_type=None):
        return self.request(url, method="post", data=data, headers=headers, content_type=content_type)

    def put(self, url, data=None, headers=None, content_type=None):
        return self.request(url, method="put", data=data, headers=headers, content_type=content_type)

    def delete(self, url, headers=None):
        return self.request(url, method="delete", headers=headers)
