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
"""utils to centralize the test settings and the in-memory GeoServer."""
import json
import threading
from collections import namedtuple

from geoserver_repository.repository import GeoserverRepository

GSHOSTNAME = 'localhost'
GSPORT = '8080'
GSCONTEXT = 'geoserver'
GSUSER = 'admin'
GSPASSWORD = 'geoserver'
GSWORKSPACE = 'geoportal'
GSDATASTORE = 'flat'

REST_URL = f"http://{GSHOSTNAME}:{GSPORT}/{GSCONTEXT}/rest"

DBPARAMS = dict(
    host="localhost",
    port="5432",
    database="db",
    user="postgres",
    password="postgres"
)

GSCONNECTION = dict(
    host=GSHOSTNAME,
    port=GSPORT,
    context=GSCONTEXT,
    user=GSUSER,
    workspace=GSWORKSPACE,
    datastore=GSDATASTORE,
    timeout=5000
)
GSCONNECTION['pass'] = GSPASSWORD


def rest(path):
    return f"{REST_URL}/{path}"


def repository_settings(**connection):
    gs = dict(GSCONNECTION)
    gs.update(connection)
    return {"geoserverConnection": gs, "database": {"flat": dict(DBPARAMS)}}


Call = namedtuple("Call", "method url data headers timeout")


class FakeResponse(object):

    def __init__(self, url, status_code, body=None):
        self.url = url
        self.status_code = status_code
        if body is None:
            self.text = ""
        elif isinstance(body, str):
            self.text = body
        else:
            self.text = json.dumps(body)

    def json(self):
        return json.loads(self.text)


class FakeSession(object):
    """
    Stands in for the requests session of a dispatcher. Answers come from a
    route table keyed by (METHOD, url); a route may also hold an exception
    to raise. Unrouted GETs answer 404, other verbs their success status.
    """

    DEFAULT_STATUS = {"GET": 404, "POST": 201, "PUT": 200, "DELETE": 200}

    def __init__(self):
        self.routes = {}
        self.calls = []
        self._lock = threading.Lock()

    def route(self, method, url, status=200, body=None):
        self.routes[(method.upper(), url)] = (status, body)

    def fail(self, method, url, error):
        self.routes[(method.upper(), url)] = error

    def found(self, *urls):
        for url in urls:
            self.route("GET", url, 200, {})

    def _call(self, method, url, headers=None, data=None, timeout=None):
        with self._lock:
            self.calls.append(Call(method, url, data, headers, timeout))
            answer = self.routes.get((method, url))
        if isinstance(answer, Exception):
            raise answer
        if answer is None:
            answer = (self.DEFAULT_STATUS[method], None)
        status, body = answer
        return FakeResponse(url, status, body)

    def get(self, url, **kwargs):
        return self._call("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._call("POST", url, **kwargs)

    def put(self, url, **kwargs):
        return self._call("PUT", url, **kwargs)

    def delete(self, url, **kwargs):
        return self._call("DELETE", url, **kwargs)

    def urls(self, method):
        return [c.url for c in self.calls if c.method == method]

    def calls_to(self, method, url):
        return [c for c in self.calls if c.method == method and c.url == url]

    def writes(self):
        return [(c.method, c.url) for c in self.calls if c.method != "GET"]


def fake_repository(**connection):
    """A repository whose HTTP calls are answered by a FakeSession."""
    repository = GeoserverRepository(repository_settings(**connection))
    session = FakeSession()
    repository.dispatcher.client = session
    return repository, session
