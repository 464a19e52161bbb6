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

from geoserver_repository.catalog import GeoserverCatalog
from geoserver_repository.config import RepositoryConfig
from geoserver_repository.coverage import CoverageManager, CoverageStoreManager
from geoserver_repository.datastore import DatastoreManager
from geoserver_repository.exceptions import FailedRequestError
from geoserver_repository.external import WMS, WMTS, ExternalLayerManager, ExternalStoreManager
from geoserver_repository.featuretype import FeatureTypeManager
from geoserver_repository.layer import LayerManager
from geoserver_repository.layergroup import LayerGroupManager
from geoserver_repository.legend import Legend
from geoserver_repository.style import StyleManager
from geoserver_repository.workspace import WorkspaceManager

logger = logging.getLogger("gsrepository.repository")


class GeoserverRepository(object):
    """
    Single entry point to a GeoServer instance.

    Accepts either a `RepositoryConfig` or the mapping
    `{"geoserverConnection": {...}, "database": {"flat": {...}}}` and holds one
    manager per resource type, all sharing the same catalog (and so the same
    dispatcher). Every operation returns its result or raises.
    """

    def __init__(self, config, dispatcher=None):
        self.config = RepositoryConfig.from_mapping(config)
        self.catalog = GeoserverCatalog(self.config, dispatcher=dispatcher)
        self.types = self.catalog.types

        self.is_enabled = False
        self.geoserver_details = None

        self.workspaces = WorkspaceManager(self.catalog)
        self.datastores = DatastoreManager(self.catalog)
        self.feature_types = FeatureTypeManager(self.catalog)
        self.layers = LayerManager(self.catalog)
        self.layer_groups = LayerGroupManager(self.catalog)
        self.coverage_stores = CoverageStoreManager(self.catalog)
        self.coverages = CoverageManager(self.catalog)
        self.styles = StyleManager(self.catalog, self.layers)
        self.wms_stores = ExternalStoreManager(self.catalog, WMS)
        self.wms_layers = ExternalLayerManager(self.catalog, WMS, self.wms_stores, self.layer_groups)
        self.wmts_stores = ExternalStoreManager(self.catalog, WMTS)
        self.wmts_layers = ExternalLayerManager(self.catalog, WMTS, self.wmts_stores, self.layer_groups)
        self.legend = Legend(self.config)

    def __repr__(self):
        return f"GeoserverRepository[{self.config.rest_url}]"

    @property
    def dispatcher(self):
        return self.catalog.dispatcher

    @property
    def resolver(self):
        return self.catalog.resolver

    # service

    def is_geoserver_running(self):
        try:
            details = self.catalog.get_version_details()
        except FailedRequestError as e:
            self.is_enabled = False
            logger.error(f"GeoServer is not available at {self.config.base_url}: {e}")
            raise
        self.geoserver_details = details
        self.is_enabled = True
        logger.info(f"GeoServer {details.get('Version', '')} is running at {self.config.base_url}")
        return True

    def reload_catalog(self):
        return self.catalog.post_service("reload", "Error reloading GeoServer catalog")

    def reset_cache(self):
        return self.catalog.post_service("reset", "Error resetting GeoServer cache")

    def get_fonts(self):
        return self.catalog.get_fonts()

    def initialize_workspace(self):
        self.is_geoserver_running()
        self.create_workspace()
        self.create_datastore()
        return True

    # generic objects

    def geoserver_object_exists(self, type_name, config=None):
        return self.catalog.geoserver_object_exists(type_name, config)

    def get_geoserver_object(self, type_name, config=None):
        return self.catalog.get_geoserver_object(type_name, config)

    def create_geoserver_object(self, type_name, config, payload):
        return self.catalog.create_geoserver_object(type_name, config, payload)

    def update_geoserver_object(self, type_name, config, payload):
        return self.catalog.update_geoserver_object(type_name, config, payload)

    def delete_geoserver_object(self, type_name, config=None, recurse=False, purge=None):
        return self.catalog.delete_geoserver_object(type_name, config, recurse=recurse, purge=purge)

    # workspaces

    def workspace_exists(self, config=None):
        return self.workspaces.workspace_exists(config)

    def get_workspace(self, config=None):
        return self.workspaces.get_workspace(config)

    def create_workspace(self, config=None):
        return self.workspaces.create_workspace(config)

    def delete_workspace(self, config=None):
        return self.workspaces.delete_workspace(config)

    # datastores

    def datastore_exists(self, config=None):
        return self.datastores.datastore_exists(config)

    def get_datastore(self, config=None):
        return self.datastores.get_datastore(config)

    def create_datastore(self, config=None):
        return self.datastores.create_datastore(config)

    def update_datastore(self, config):
        return self.datastores.update_datastore(config)

    def delete_datastore(self, config=None):
        return self.datastores.delete_datastore(config)

    # feature types

    def feature_type_exists(self, config):
        return self.feature_types.feature_type_exists(config)

    def get_feature_type(self, config):
        return self.feature_types.get_feature_type(config)

    def create_feature_type(self, config):
        return self.feature_types.create_feature_type(config)

    def update_feature_type(self, config):
        return self.feature_types.update_feature_type(config)

    def delete_feature_type(self, config):
        return self.feature_types.delete_feature_type(config)

    def rename_feature_type(self, config, new_name):
        return self.feature_types.rename_feature_type(config, new_name)

    def recalculate_feature_type_bbox(self, config):
        return self.feature_types.recalculate_feature_type_bbox(config)

    # layers

    def layer_exists(self, config):
        return self.layers.layer_exists(config)

    def get_layer(self, config):
        return self.layers.get_layer(config)

    def create_layer(self, config):
        return self.layers.create_layer(config)

    def update_layer(self, config):
        return self.layers.update_layer(config)

    def delete_layer(self, config):
        return self.layers.delete_layer(config)

    # layer groups

    def layer_group_request_object(self, config, layer_names):
        return self.layer_groups.layer_group_request_object(config, layer_names)

    def layer_group_exists(self, config):
        return self.layer_groups.layer_group_exists(config)

    def get_layer_group(self, config):
        return self.layer_groups.get_layer_group(config)

    def create_layer_group(self, config, layer_names):
        return self.layer_groups.create_layer_group(config, layer_names)

    def update_layer_group(self, config, layer_names):
        return self.layer_groups.update_layer_group(config, layer_names)

    def delete_layer_group(self, config):
        return self.layer_groups.delete_layer_group(config)

    # coverage stores and coverages

    def coverage_store_exists(self, config):
        return self.coverage_stores.coverage_store_exists(config)

    def get_coverage_store(self, config):
        return self.coverage_stores.get_coverage_store(config)

    def create_coverage_store(self, config):
        return self.coverage_stores.create_coverage_store(config)

    def update_coverage_store(self, config):
        return self.coverage_stores.update_coverage_store(config)

    def delete_coverage_store(self, config):
        return self.coverage_stores.delete_coverage_store(config)

    def coverage_exists(self, config):
        return self.coverages.coverage_exists(config)

    def get_coverage(self, config):
        return self.coverages.get_coverage(config)

    def create_coverage(self, config):
        return self.coverages.create_coverage(config)

    def update_coverage(self, config):
        return self.coverages.update_coverage(config)

    def delete_coverage(self, config):
        return self.coverages.delete_coverage(config)

    # wms

    def wms_store_exists(self, config):
        return self.wms_stores.store_exists(config)

    def get_wms_store(self, config):
        return self.wms_stores.get_store(config)

    def create_wms_store(self, config):
        return self.wms_stores.create_store(config)

    def update_wms_store(self, config):
        return self.wms_stores.update_store(config)

    def delete_wms_store(self, config):
        return self.wms_stores.delete_store(config)

    def wms_layer_exists(self, layer_params, wms_layer_params):
        return self.wms_layers.layer_exists(layer_params, wms_layer_params)

    def get_wms_layer(self, config):
        return self.wms_layers.get_layer(config)

    def create_wms_layer(self, external_layer):
        return self.wms_layers.create_layer(external_layer)

    def update_wms_layer(self, external_layer, previous_layer):
        return self.wms_layers.update_layer(external_layer, previous_layer)

    def delete_wms_layer(self, external_layer):
        return self.wms_layers.delete_layer(external_layer)

    def delete_wms_external_service(self, service, external_layers):
        return self.wms_layers.delete_external_service(service, external_layers)

    # wmts

    def wmts_store_exists(self, config):
        return self.wmts_stores.store_exists(config)

    def get_wmts_store(self, config):
        return self.wmts_stores.get_store(config)

    def create_wmts_store(self, config):
        return self.wmts_stores.create_store(config)

    def update_wmts_store(self, config):
        return self.wmts_stores.update_store(config)

    def delete_wmts_store(self, config):
        return self.wmts_stores.delete_store(config)

    def wmts_layer_exists(self, layer_params, wmts_layer_params):
        return self.wmts_layers.layer_exists(layer_params, wmts_layer_params)

    def get_wmts_layer(self, config):
        return self.wmts_layers.get_layer(config)

    def create_wmts_layer(self, external_layer):
        return self.wmts_layers.create_layer(external_layer)

    def update_wmts_layer(self, external_layer, previous_layer):
        return self.wmts_layers.update_layer(external_layer, previous_layer)

    def delete_wmts_layer(self, external_layer):
        return self.wmts_layers.delete_layer(external_layer)

    def delete_wmts_external_service(self, service, external_layers):
        return self.wmts_layers.delete_external_service(service, external_layers)

    # styles

    def global_style_exists(self, config):
        return self.styles.global_style_exists(config)

    def get_global_style(self, config):
        return self.styles.get_global_style(config)

    def get_global_styles(self):
        return self.styles.get_global_styles()

    def create_global_style_configuration(self, config):
        return self.styles.create_global_style_configuration(config)

    def upload_global_style_content(self, config):
        return self.styles.upload_global_style_content(config)

    def create_global_style(self, config):
        return self.styles.create_global_style(config)

    def delete_global_style(self, config):
        return self.styles.delete_global_style(config)

    def workspace_style_exists(self, config):
        return self.styles.workspace_style_exists(config)

    def get_workspace_style(self, config):
        return self.styles.get_workspace_style(config)

    def get_workspace_styles(self, config=None):
        return self.styles.get_workspace_styles(config)

    def create_workspace_style_configuration(self, config):
        return self.styles.create_workspace_style_configuration(config)

    def upload_workspace_style_content(self, config):
        return self.styles.upload_workspace_style_content(config)

    def create_workspace_style(self, config):
        return self.styles.create_workspace_style(config)

    def delete_workspace_style(self, config):
        return self.styles.delete_workspace_style(config)

    def layer_style_exists(self, config, style_name):
        return self.styles.layer_style_exists(config, style_name)

    def get_layer_styles(self, config):
        return self.styles.get_layer_styles(config)

    def get_layer_default_style(self, config):
        return self.styles.get_layer_default_style(config)

    def add_layer_style(self, config, style):
        return self.styles.add_layer_style(config, style)

    def create_layer_style(self, config):
        return self.styles.create_layer_style(config)

    def set_layer_default_style(self, config, style_name):
        return self.styles.set_layer_default_style(config, style_name)

    def set_layer_default_workspace_style(self, config, style_name):
        return self.styles.set_layer_default_workspace_style(config, style_name)

    # legend

    def get_rule_url(self, config):
        return self.legend.get_rule_url(config)
