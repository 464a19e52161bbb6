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

import json
import logging

from geoserver_repository.dispatcher import Dispatcher
from geoserver_repository.exceptions import FailedRequestError, InvalidConfigurationError
from geoserver_repository.resolver import Resolver, GeoserverTypes
from geoserver_repository.support import parse_json, throttle, unwrap

logger = logging.getLogger("gsrepository.catalog")


def _name(config):
    return config.get("name") if config else None


class GeoserverCatalog(object):
    """
    The generic REST operations every resource manager is built on:
    - existence checks (any status but 200 means "does not exist")
    - fetching an object as JSON
    - creating an object by POSTing to its collection
    - updating an object by PUTting to its own URL
    - deleting an object, optionally recursing into its children
    """

    types = GeoserverTypes

    def __init__(self, config, dispatcher=None, resolver=None):
        self.config = config
        self.dispatcher = dispatcher or Dispatcher(
            config.rest_url,
            username=config.user,
            password=config.password,
            timeout=config.timeout
        )
        self.resolver = resolver or Resolver(
            config.rest_url,
            workspace=config.workspace,
            datastore=config.datastore
        )

    @property
    def workspace(self):
        return self.config.workspace

    @property
    def datastore(self):
        return self.config.datastore

    def map_throttled(self, fn, values):
        return throttle(values, self.config.throttle, fn)

    def check_response(self, resp, expected, message):
        if resp.status_code != expected:
            body = None if resp.text == ":null" else resp.text
            msg = f"{message}: {resp.status_code}, {body}"
            logger.error(msg)
            raise FailedRequestError(msg, resp.status_code, body)
        return resp

    def get_json(self, url):
        resp = self.dispatcher.get(url)
        if resp.status_code != 200:
            raise FailedRequestError(resp.text, resp.status_code, resp.text)
        return parse_json(resp)

    def object_url(self, type_name, config=None):
        return f"{self.resolver.get(type_name, config)}.json"

    def geoserver_object_exists(self, type_name, config=None):
        resp = self.dispatcher.get(self.object_url(type_name, config))
        return resp.status_code == 200

    def get_geoserver_object(self, type_name, config=None):
        return self.get_json(self.object_url(type_name, config))

    def create_geoserver_object(self, type_name, config, payload):
        url = self.resolver.create(type_name, config)
        resp = self.dispatcher.post(url, data=json.dumps(payload))
        self.check_response(resp, 201, f"Error creating Geoserver object {type_name} {_name(config)}")
        return True

    def update_geoserver_object(self, type_name, config, payload, query=None):
        url = self.resolver.get(type_name, config, query)
        resp = self.dispatcher.put(url, data=json.dumps(payload))
        self.check_response(resp, 200, f"Error updating Geoserver object {type_name} {_name(config)}")
        return True

    def delete_geoserver_object(self, type_name, config=None, recurse=False, purge=None):
        query = dict()
        if recurse:
            query["recurse"] = "true"
        if purge:
            query["purge"] = str(purge).lower()

        url = self.resolver.delete(type_name, config, query)
        resp = self.dispatcher.delete(url)
        self.check_response(resp, 200, f"Error deleting Geoserver object {type_name} {_name(config)}")
        return True

    def put_raw(self, url, data, content_type, expected=200, message="Error uploading content"):
        resp = self.dispatcher.put(url, data=data, content_type=content_type)
        self.check_response(resp, expected, message)
        return True

    def post_service(self, endpoint, message):
        resp = self.dispatcher.post(self.resolver.service_url(endpoint))
        self.check_response(resp, 200, message)
        return True

    def get_version_details(self):
        '''the first resource listed by /about/version, GeoServer itself'''
        details = self.get_json(self.resolver.service_url("about"))
        resources = details.get("about", {}).get("resource") or [{}]
        return resources[0]

    def get_fonts(self):
        return self.get_json(self.resolver.service_url("fonts")).get("fonts", [])


class ResourceManager(object):
    """
    Base of the per-type managers, all sharing one catalog.

    Every single-resource operation goes through `identified`: a config
    naming no resource (and with no configured default) is rejected before
    any request is issued.
    """

    resource_type = None

    def __init__(self, catalog):
        self.catalog = catalog

    def resolve_workspace_name(self, config):
        return config and config.get("workspace") or self.catalog.workspace

    def require(self, config, key, message):
        if not (config and config.get(key)):
            raise InvalidConfigurationError(message)
        return config[key]

    def identified(self, config):
        if not self.catalog.resolver.item(self.resource_type, config):
            raise InvalidConfigurationError(f"{self.resource_type} name required")
        return config

    def exists(self, config):
        return self.catalog.geoserver_object_exists(self.resource_type, self.identified(config))

    def fetch(self, config, key):
        return unwrap(self.catalog.get_geoserver_object(self.resource_type, self.identified(config)), key)

    def update(self, config, payload, query=None):
        return self.catalog.update_geoserver_object(self.resource_type, self.identified(config), payload, query)

    def create_unless_exists(self, config, payload):
        if self.exists(config):
            logger.debug(f"{self.resource_type} {_name(config)} already exists")
            return True
        return self.catalog.create_geoserver_object(self.resource_type, config, payload)

    def delete_if_exists(self, config, recurse=False, purge=None):
        if not self.exists(config):
            logger.debug(f"{self.resource_type} {_name(config)} does not exist, nothing to delete")
            return config
        return self.catalog.delete_geoserver_object(self.resource_type, config, recurse=recurse, purge=purge)
