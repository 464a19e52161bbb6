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
"""Connection and database settings shared by every resource manager."""
import os
from copy import deepcopy

from geoserver_repository.exceptions import InvalidConfigurationError

DEFAULT_TIMEOUT = 5000
DEFAULT_THROTTLE = 5
DEFAULT_DBTYPE = "postgis"


def _database_parameters(db):
    params = dict(db or {})
    if not params.get("passwd"):
        params["passwd"] = params.pop("password", None)
    else:
        params.pop("password", None)
    params["dbtype"] = DEFAULT_DBTYPE
    return params


class RepositoryConfig(object):
    """
    Immutable settings of a repository client:
    - where the GeoServer instance lives (host, port, context, admin path)
    - the credentials sent with every request
    - the default workspace and datastore used when a resource config omits them
    - the request timeout (milliseconds) and the parallel window of batch calls
    - the database connection parameters handed over to new datastores
    """

    def __init__(self, host="localhost", port=8080, context="geoserver", user="admin", password="geoserver",
                 workspace=None, datastore=None, timeout=DEFAULT_TIMEOUT, admin_path=None,
                 throttle=DEFAULT_THROTTLE, database=None):
        if not host:
            raise InvalidConfigurationError("GeoServer host required")
        self._host = host
        self._port = int(port)
        self._context = (context or "").strip("/")
        self._admin_path = (admin_path or "").strip("/")
        self._user = user
        self._password = password
        self._workspace = workspace
        self._datastore = datastore
        self._timeout = int(timeout or DEFAULT_TIMEOUT)
        self._throttle = int(throttle or DEFAULT_THROTTLE)
        self._database = _database_parameters(database)

    @classmethod
    def from_mapping(cls, config):
        '''
          Builds the settings out of the facade mapping:
          {"geoserverConnection": {...}, "database": {"flat": {...}}}
        '''
        if isinstance(config, RepositoryConfig):
            return config
        if not config or "geoserverConnection" not in config:
            raise InvalidConfigurationError("geoserverConnection settings required")

        gs = config["geoserverConnection"] or {}
        db = (config.get("database") or {}).get("flat")
        return cls(
            host=gs.get("host"),
            port=gs.get("port", 8080),
            context=gs.get("context"),
            user=gs.get("user"),
            password=gs.get("pass"),
            workspace=gs.get("workspace"),
            datastore=gs.get("datastore"),
            timeout=gs.get("timeout"),
            admin_path=gs.get("adminPath"),
            throttle=gs.get("throttle"),
            database=db
        )

    @classmethod
    def from_env(cls, environ=None):
        """Settings from GS*/DB* environment variables, local defaults otherwise."""
        env = os.environ if environ is None else environ
        database = dict(
            host=env.get("DBHOST", "localhost"),
            port=env.get("DBPORT", "5432"),
            database=env.get("DATABASE", "db"),
            user=env.get("DBUSER", "postgres"),
            passwd=env.get("DBPASS", "postgres")
        )
        return cls(
            host=env.get("GSHOSTNAME", "localhost"),
            port=env.get("GSPORT", "8080"),
            context=env.get("GSCONTEXT", "geoserver"),
            user=env.get("GSUSER", "admin"),
            password=env.get("GSPASSWORD", "geoserver"),
            workspace=env.get("GSWORKSPACE", "geoportal"),
            datastore=env.get("GSDATASTORE", "flat"),
            timeout=env.get("GSTIMEOUT", DEFAULT_TIMEOUT),
            database=database
        )

    @property
    def host(self):
        return self._host

    @property
    def port(self):
        return self._port

    @property
    def context(self):
        return self._context

    @property
    def admin_path(self):
        return self._admin_path

    @property
    def user(self):
        return self._user

    @property
    def password(self):
        return self._password

    @property
    def workspace(self):
        return self._workspace

    @property
    def datastore(self):
        return self._datastore

    @property
    def timeout(self):
        return self._timeout

    @property
    def throttle(self):
        return self._throttle

    @property
    def database(self):
        return deepcopy(self._database)

    @property
    def base_url(self):
        url = f"http://{self.host}:{self.port}/"
        if self.context:
            url += f"{self.context}/"
        if self.admin_path:
            url += f"{self.admin_path}/"
        return url

    @property
    def rest_url(self):
        return f"{self.base_url}rest"

    def __repr__(self):
        return f"<RepositoryConfig {self.rest_url} workspace={self.workspace} datastore={self.datastore}>"
