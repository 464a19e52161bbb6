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
import unittest

from geoserver_repository.exceptions import ConflictingDataError, InvalidConfigurationError
from .utils import fake_repository, rest

GROUP = {"name": "grp", "label": "Group"}


class LayerGroupTests(unittest.TestCase):

    def setUp(self):
        self.repo, self.session = fake_repository()

    def testNameRequired(self):
        with self.assertRaises(InvalidConfigurationError):
            self.repo.layer_group_exists({"layers": ["a"]})
        with self.assertRaises(InvalidConfigurationError):
            self.repo.delete_layer_group({})
        with self.assertRaises(InvalidConfigurationError):
            self.repo.create_layer_group({}, ["a"])
        with self.assertRaises(InvalidConfigurationError):
            self.repo.update_layer_group({}, ["a"])
        self.assertEqual(self.session.calls, [])

    def testRequestObject(self):
        body = self.repo.layer_group_request_object(GROUP, ["a", "b"])
        self.assertEqual(body, {
            "layerGroup": {
                "name": "grp",
                "title": "Group",
                "layers": {"layer": [{"enabled": True, "name": "a"}, {"enabled": True, "name": "b"}]},
                "styles": {"style": ["", ""]}
            },
            "srs": "EPSG:2056",
            "projectionPolicy": "REPROJECT_TO_DECLARED"
        })

    def testRequestObjectSrs(self):
        body = self.repo.layer_group_request_object(dict(GROUP, srs="EPSG:4326"), [])
        self.assertEqual(body["srs"], "EPSG:4326")

    def testCreate(self):
        self.assertTrue(self.repo.create_layer_group(GROUP, ["a"]))
        self.assertEqual(self.session.urls("GET"), [rest("layergroups/grp.json")])
        [post] = self.session.calls_to("POST", rest("layergroups"))
        self.assertEqual(json.loads(post.data)["layerGroup"]["layers"]["layer"], [{"enabled": True, "name": "a"}])

    def testCreateConflict(self):
        self.session.found(rest("layergroups/grp.json"))
        with self.assertRaises(ConflictingDataError):
            self.repo.create_layer_group(GROUP, ["a"])
        self.assertEqual(self.session.writes(), [])

    def testUpdate(self):
        self.repo.update_layer_group(GROUP, ["a", "c"])
        [put] = self.session.calls_to("PUT", rest("layergroups/grp"))
        self.assertEqual(json.loads(put.data)["layerGroup"]["styles"], {"style": ["", ""]})

    def testGet(self):
        self.session.route("GET", rest("layergroups/grp.json"), 200, {"layerGroup": {"name": "grp"}})
        self.assertEqual(self.repo.get_layer_group(GROUP), {"name": "grp"})

    def testDelete(self):
        self.session.found(rest("layergroups/grp.json"))
        self.assertTrue(self.repo.delete_layer_group(GROUP))
        self.assertEqual(self.session.urls("DELETE"), [rest("layergroups/grp")])

    def testDeleteMissing(self):
        self.assertIs(self.repo.delete_layer_group(GROUP), GROUP)
        self.assertEqual(self.session.writes(), [])


if __name__ == "__main__":
    unittest.main()
