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

import logging

from geoserver_repository.catalog import ResourceManager
from geoserver_repository.exceptions import FailedRequestError
from geoserver_repository.resolver import GeoserverTypes

logger = logging.getLogger("gsrepository.coverage")

DEFAULT_COVERAGE_STORE_TYPE = "imagepyramid"


class CoverageStoreManager(ResourceManager):
    """
    Raster stores. A store is created from a file or directory already
    reachable by GeoServer: the path is PUT as plain text to
    `.../coveragestores/<name>/external.<type>` and GeoServer configures the
    store together with its coverages.
    """

    resource_type = GeoserverTypes.COVERAGESTORE

    def resolve_coverage_store_config(self, config):
        return {
            "name": config and config.get("name"),
            "workspace": self.resolve_workspace_name(config)
        }

    def coverage_store_exists(self, config):
        return self.exists(self.resolve_coverage_store_config(config))

    def get_coverage_store(self, config):
        return self.fetch(self.resolve_coverage_store_config(config), "coverageStore")

    def create_coverage_store(self, config):
        directory = self.require(config, "coverageDirectory", "coverageDirectory parameter required")
        store = self.resolve_coverage_store_config(config)
        if self.exists(store):
            logger.debug(f"Coverage store {store['name']} already exists")
            return True

        store_type = config.get("coverageStoreType") or DEFAULT_COVERAGE_STORE_TYPE
        url = f"{self.catalog.resolver.create(self.resource_type, store)}/external.{store_type}"
        return self.catalog.put_raw(
            url, directory, "text/plain", expected=201,
            message=f"Error creating Geoserver object {self.resource_type} {store['name']}")

    def update_coverage_store(self, config):
        payload = {"coverageStore": self.require(config, "coverageStore", "coverageStore parameter required")}
        return self.update(self.resolve_coverage_store_config(config), payload)

    def delete_coverage_store(self, config):
        store = self.resolve_coverage_store_config(config)
        if not self.exists(store):
            return config
        return self.catalog.delete_geoserver_object(self.resource_type, store, recurse=True, purge="metadata")


class CoverageManager(ResourceManager):
    """Coverages of a store; the store is named after the coverage unless given."""

    resource_type = GeoserverTypes.COVERAGE

    def resolve_coverage_config(self, config):
        name = config and config.get("name")
        return {
            "name": name,
            "store": config and config.get("store") or name,
            "workspace": self.resolve_workspace_name(config)
        }

    def coverage_exists(self, config):
        return self.exists(self.resolve_coverage_config(config))

    def get_coverage(self, config):
        return self.fetch(self.resolve_coverage_config(config), "coverage")

    def create_coverage(self, config):
        name = self.require(config, "name", "coverage name required")
        payload = {"coverage": {"name": name, "nativeName": config.get("nativeName") or name}}
        return self.create_unless_exists(self.resolve_coverage_config(config), payload)

    def update_coverage(self, config):
        updated = self.require(config, "updatedConfig", "updatedConfig parameter required")
        coverage = self.resolve_coverage_config(config)
        if not self.exists(coverage):
            raise FailedRequestError(f"Coverage {coverage['name']} doesn't exist")
        return self.update(coverage, updated)

    def delete_coverage(self, config):
        coverage = self.resolve_coverage_config(config)
        if not self.exists(coverage):
            return config
        return self.catalog.delete_geoserver_object(self.resource_type, coverage, recurse=True)
