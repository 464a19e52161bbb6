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
from geoserver_repository.exceptions import InvalidConfigurationError
from geoserver_repository.resolver import GeoserverTypes
from geoserver_repository.support import unwrap

logger = logging.getLogger("gsrepository.style")

SLD_CONTENT_TYPE = "application/vnd.ogc.sld+xml"


def style_request_object(name):
    return {"style": {"name": name, "filename": f"{name}.sld"}}


def _style_list(record):
    # an empty listing comes back as {"styles": ""}
    styles = unwrap(record, "styles") or {}
    return styles.get("style") or []


class StyleManager(ResourceManager):
    """
    Styles in their three scopes:
    - global styles, under /styles
    - workspace styles, under /workspaces/<ws>/styles
    - the styles a layer is published with, under /layers/<ws>:<layer>/styles

    A style is registered first (name and SLD file name), then its SLD
    content is uploaded to it.
    """

    resource_type = GeoserverTypes.STYLE

    def __init__(self, catalog, layers):
        super(StyleManager, self).__init__(catalog)
        self.layers = layers

    def _require_name(self, config):
        return self.require(config, "name", "style name required")

    def _require_content(self, config):
        if not (config and config.get("name") and config.get("sldBody")):
            raise InvalidConfigurationError("style name and sld content required")
        return config["sldBody"]

    def _style_config(self, style_type, config):
        style = {"name": config.get("name")}
        if style_type == GeoserverTypes.WORKSPACESTYLE:
            style["workspace"] = self.resolve_workspace_name(config)
        return style

    # generic, per style type

    def _style_exists(self, style_type, config):
        self._require_name(config)
        return self.catalog.geoserver_object_exists(style_type, self._style_config(style_type, config))

    def _get_style(self, style_type, config):
        self._require_name(config)
        return unwrap(self.catalog.get_geoserver_object(style_type, self._style_config(style_type, config)), "style")

    def _create_style_configuration(self, style_type, config):
        name = self._require_name(config)
        return self.catalog.create_geoserver_object(
            style_type, self._style_config(style_type, config), style_request_object(name))

    def _upload_style_content(self, style_type, config):
        sld_body = self._require_content(config)
        url = self.catalog.resolver.get(style_type, self._style_config(style_type, config))
        return self.catalog.put_raw(url, sld_body, SLD_CONTENT_TYPE, message="Error uploading style SLD file")

    def _create_style(self, style_type, config):
        self._require_content(config)
        if not self._style_exists(style_type, config):
            self._create_style_configuration(style_type, config)
        return self._upload_style_content(style_type, config)

    def _delete_style(self, style_type, config):
        self._require_name(config)
        style = self._style_config(style_type, config)
        if not self.catalog.geoserver_object_exists(style_type, style):
            return config
        return self.catalog.delete_geoserver_object(style_type, style, purge=True)

    # global styles

    def global_style_exists(self, config):
        return self._style_exists(GeoserverTypes.STYLE, config)

    def get_global_style(self, config):
        return self._get_style(GeoserverTypes.STYLE, config)

    def get_global_styles(self):
        return _style_list(self.catalog.get_geoserver_object(GeoserverTypes.STYLE))

    def create_global_style_configuration(self, config):
        return self._create_style_configuration(GeoserverTypes.STYLE, config)

    def upload_global_style_content(self, config):
        return self._upload_style_content(GeoserverTypes.STYLE, config)

    def create_global_style(self, config):
        return self._create_style(GeoserverTypes.STYLE, config)

    def delete_global_style(self, config):
        return self._delete_style(GeoserverTypes.STYLE, config)

    # workspace styles

    def workspace_style_exists(self, config):
        return self._style_exists(GeoserverTypes.WORKSPACESTYLE, config)

    def get_workspace_style(self, config):
        return self._get_style(GeoserverTypes.WORKSPACESTYLE, config)

    def get_workspace_styles(self, config=None):
        ws = {"workspace": self.resolve_workspace_name(config)}
        return _style_list(self.catalog.get_geoserver_object(GeoserverTypes.WORKSPACESTYLE, ws))

    def create_workspace_style_configuration(self, config):
        return self._create_style_configuration(GeoserverTypes.WORKSPACESTYLE, config)

    def upload_workspace_style_content(self, config):
        return self._upload_style_content(GeoserverTypes.WORKSPACESTYLE, config)

    def create_workspace_style(self, config):
        return self._create_style(GeoserverTypes.WORKSPACESTYLE, config)

    def delete_workspace_style(self, config):
        return self._delete_style(GeoserverTypes.WORKSPACESTYLE, config)

    # layer styles

    def _layer_config(self, config):
        self.require(config, "name", "layer name required")
        return {"name": config["name"], "workspace": self.resolve_workspace_name(config)}

    def get_layer_styles(self, config):
        record = self.catalog.get_geoserver_object(GeoserverTypes.LAYERSTYLE, self._layer_config(config))
        return _style_list(record)

    def layer_style_exists(self, config, style_name):
        if not style_name:
            raise InvalidConfigurationError("style name required")
        return any(style.get("name") == style_name for style in self.get_layer_styles(config))

    def get_layer_default_style(self, config):
        layer = self.layers.get_layer(self._layer_config(config))
        return layer.get("defaultStyle")

    def add_layer_style(self, config, style):
        """
        Attaches an existing style to the layer as an alternate style;
        `style` is a style name or a `{"name", "workspace"}` mapping.
        """
        if isinstance(style, str):
            style = {"name": style}
        if not (style and style.get("name")):
            raise InvalidConfigurationError("style name required")
        return self.catalog.create_geoserver_object(
            GeoserverTypes.LAYERSTYLE, self._layer_config(config), {"style": dict(style)})

    def create_layer_style(self, config):
        """
        Creates (or refreshes) the workspace style `config["style"]` out of
        `config["sldBody"]` and attaches it to the layer `config["name"]`.
        """
        layer = self._layer_config(config)
        style_name = self.require(config, "style", "style name required")
        style = {"name": style_name, "workspace": layer["workspace"], "sldBody": config.get("sldBody")}

        self.create_workspace_style(style)
        if self.layer_style_exists(layer, style_name):
            logger.debug(f"Style {style_name} already attached to layer {layer['name']}")
            return True
        return self.add_layer_style(layer, {"name": style_name, "workspace": layer["workspace"]})

    def set_layer_default_style(self, config, style_name):
        if not (style_name and config and config.get("name")):
            raise InvalidConfigurationError("layer and style name required")
        layer = self._layer_config(config)
        layer["layer"] = {"defaultStyle": {"name": style_name}}
        return self.layers.update_layer(layer)

    def set_layer_default_workspace_style(self, config, style_name):
        if not (style_name and config and config.get("name")):
            raise InvalidConfigurationError("layer and style name required")
        layer = self._layer_config(config)
        layer["layer"] = {"defaultStyle": {"name": style_name, "workspace": layer["workspace"]}}
        return self.layers.update_layer(layer)
