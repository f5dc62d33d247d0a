"""
Unit tests for the gpzoo configuration object.
"""

import logging
import unittest

import gpzoo as gz
from gpzoo import config


class TestConfig(unittest.TestCase):

    def tearDown(self):
        config.reset_numerics()
        config.set_log_level(logging.INFO)

    def test_defaults(self):
        cfg = config.get_config()
        self.assertEqual(cfg.jitter, 1e-8)
        self.assertEqual(cfg.sample_jitter, 1e-6)
        self.assertEqual(cfg.cholesky_floor, 1e-10)
        self.assertEqual(cfg.variance_floor, 1e-10)
        self.assertFalse(cfg.strict_cholesky)
        self.assertIn("jitter=1e-08", str(cfg))
        self.assertEqual(gz.__version__, cfg.version)

    def test_update_and_reset(self):
        cfg = config.get_config()
        cfg.update(jitter=1e-4, variance_floor=1e-3)
        self.assertEqual(cfg.jitter, 1e-4)
        config.reset_numerics()
        self.assertEqual(cfg.jitter, 1e-8)
        self.assertEqual(cfg.variance_floor, 1e-10)

    def test_update_rejects_unknown_and_negative(self):
        cfg = config.get_config()
        with self.assertRaises(AttributeError):
            cfg.update(jiter=1e-4)
        with self.assertRaises(ValueError):
            cfg.update(jitter=-1.0)

    def test_floors_are_used_by_the_engine(self):
        params = gz.GPParams(lengthscale=1.0, signal_variance=1.0, noise_level=0.0)
        config.get_config().update(variance_floor=0.01)
        res = gz.compute_posterior([(0.0, 1.0)], [0.0], params)
        self.assertEqual(res.variance[0], 0.01)

        config.reset_numerics()
        config.get_config().update(jitter=1.0)
        res = gz.compute_posterior([(0.0, 1.0)], [0.0], params)
        self.assertAlmostEqual(res.mean[0], 0.5)
        self.assertAlmostEqual(res.variance[0], 0.5)

    def test_logger(self):
        logger = config.get_logger()
        self.assertEqual(logger.name, "gpzoo")
        config.set_log_level(logging.DEBUG)
        with self.assertLogs("gpzoo", level="DEBUG") as cm:
            gz.compute_posterior([(0.0, 1.0), (0.5, 0.0)], [0.25], {"lengthScale": 1, "signalVariance": 1})
        self.assertTrue(any("compute_posterior" in line for line in cm.output))

    def test_update_rejects_non_numeric(self):
        cfg = config.get_config()
        with self.assertRaises(ValueError):
            cfg.update(jitter=None)
        with self.assertRaises(ValueError):
            cfg.update(cholesky_floor="small")
        self.assertEqual(cfg.jitter, 1e-8)

    def test_update_seed_reseeds_generator(self):
        cfg = config.get_config()
        seed = cfg.seed
        try:
            cfg.update(seed=5)
            a = gz.num.randn(3)
            cfg.update(seed=5)
            b = gz.num.randn(3)
            self.assertEqual(cfg.seed, 5)
            self.assertTrue(gz.num.allclose(a, b))
        finally:
            gz.num.set_seed(seed)


if __name__ == "__main__":
    unittest.main()
