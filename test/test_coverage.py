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

from geoserver_repository.exceptions import FailedRequestError, InvalidConfigurationError
from .utils import fake_repository, rest

STORES = "workspaces/geoportal/coveragestores"


class CoverageStoreTests(unittest.TestCase):

    def setUp(self):
        self.repo, self.session = fake_repository()

    def testNameRequired(self):
        with self.assertRaises(InvalidConfigurationError):
            self.repo.coverage_store_exists({"workspace": "geoportal"})
        with self.assertRaises(InvalidConfigurationError):
            self.repo.delete_coverage_store({})
        with self.assertRaises(InvalidConfigurationError):
            self.repo.create_coverage_store({"coverageDirectory": "/data/AR_2014"})
        self.assertEqual(self.session.calls, [])

    def testDirectoryRequired(self):
        with self.assertRaises(InvalidConfigurationError):
            self.repo.create_coverage_store({"name": "AR_2014"})
        self.assertEqual(self.session.calls, [])

    def testCreate(self):
        url = rest(f"{STORES}/AR_2014/external.imagepyramid")
        self.session.route("PUT", url, 201)
        self.assertTrue(self.repo.create_coverage_store({"name": "AR_2014", "coverageDirectory": "file:///data/AR_2014"}))
        [put] = self.session.calls_to("PUT", url)
        self.assertEqual(put.data, "file:///data/AR_2014")
        self.assertEqual(put.headers["Content-type"], "text/plain")

    def testCreateWithStoreType(self):
        url = rest(f"{STORES}/DTM/external.geotiff")
        self.session.route("PUT", url, 201)
        self.repo.create_coverage_store(
            {"name": "DTM", "coverageDirectory": "/data/dtm.tif", "coverageStoreType": "geotiff"})
        self.assertEqual(self.session.writes(), [("PUT", url)])

    def testCreateUnexpectedStatus(self):
        self.session.route("PUT", rest(f"{STORES}/AR_2014/external.imagepyramid"), 500, "boom")
        with self.assertRaises(FailedRequestError):
            self.repo.create_coverage_store({"name": "AR_2014", "coverageDirectory": "/data/AR_2014"})

    def testCreateExisting(self):
        self.session.found(rest(f"{STORES}/AR_2014.json"))
        self.assertTrue(self.repo.create_coverage_store({"name": "AR_2014", "coverageDirectory": "/data/AR_2014"}))
        self.assertEqual(self.session.writes(), [])

    def testGet(self):
        self.session.route("GET", rest(f"{STORES}/AR_2014.json"), 200, {"coverageStore": {"name": "AR_2014"}})
        self.assertEqual(self.repo.get_coverage_store({"name": "AR_2014"}), {"name": "AR_2014"})

    def testDelete(self):
        self.session.found(rest(f"{STORES}/AR_2014.json"))
        self.assertTrue(self.repo.delete_coverage_store({"name": "AR_2014"}))
        self.assertEqual(self.session.urls("DELETE"), [rest(f"{STORES}/AR_2014?recurse=true&purge=metadata")])

    def testDeleteMissing(self):
        self.repo.delete_coverage_store({"name": "AR_2014"})
        self.assertEqual(self.session.writes(), [])


class CoverageTests(unittest.TestCase):

    def setUp(self):
        self.repo, self.session = fake_repository()

    def testNameRequired(self):
        with self.assertRaises(InvalidConfigurationError):
            self.repo.coverage_exists({"store": "AR_2014"})
        with self.assertRaises(InvalidConfigurationError):
            self.repo.delete_coverage({})
        self.assertEqual(self.session.calls, [])

    def testGet(self):
        url = rest(f"{STORES}/AR_2014/coverages/AR_2014.json")
        self.session.route("GET", url, 200, {"coverage": {"name": "AR_2014", "nativeName": "AR_2014"}})
        coverage = self.repo.get_coverage({"name": "AR_2014", "store": "AR_2014", "workspace": "geoportal"})
        self.assertEqual(coverage, {"name": "AR_2014", "nativeName": "AR_2014"})
        self.assertEqual(self.session.urls("GET"), [url])

    def testStoreDefaultsToName(self):
        self.session.found(rest(f"{STORES}/DTM/coverages/DTM.json"))
        self.assertTrue(self.repo.coverage_exists({"name": "DTM"}))

    def testCreate(self):
        self.repo.create_coverage({"name": "DTM", "store": "rasters"})
        [post] = self.session.calls_to("POST", rest(f"{STORES}/rasters/coverages"))
        self.assertEqual(json.loads(post.data), {"coverage": {"name": "DTM", "nativeName": "DTM"}})

    def testUpdateRequiresConfig(self):
        with self.assertRaises(InvalidConfigurationError):
            self.repo.update_coverage({"name": "DTM"})
        self.assertEqual(self.session.calls, [])

    def testUpdateMissing(self):
        with self.assertRaises(FailedRequestError) as cm:
            self.repo.update_coverage({"name": "DTM", "updatedConfig": {"coverage": {"title": "DTM"}}})
        self.assertIn("doesn't exist", str(cm.exception))
        self.assertEqual(self.session.writes(), [])

    def testUpdate(self):
        self.session.found(rest(f"{STORES}/DTM/coverages/DTM.json"))
        updated = {"coverage": {"title": "Terrain model"}}
        self.assertTrue(self.repo.update_coverage({"name": "DTM", "updatedConfig": updated}))
        [put] = self.session.calls_to("PUT", rest(f"{STORES}/DTM/coverages/DTM"))
        self.assertEqual(json.loads(put.data), updated)

    def testDelete(self):
        self.session.found(rest(f"{STORES}/DTM/coverages/DTM.json"))
        self.repo.delete_coverage({"name": "DTM"})
        self.assertEqual(self.session.urls("DELETE"), [rest(f"{STORES}/DTM/coverages/DTM?recurse=true")])


if __name__ == "__main__":
    unittest.main()
