"""
Import tests for all PyCoherent modules and submodules.

These tests ensure that all modules can be imported without errors,
which is crucial for detecting import-related issues early.
"""
import pytest


class TestMainPackageImports:
    """Test imports for the main pycoherent package."""

    @pytest.mark.importtest
    def test_main_package_import(self):
        """Test that the main pycoherent package can be imported."""
        import pycoherent
        assert hasattr(pycoherent, '__version__')
        assert hasattr(pycoherent, '__all__')

    @pytest.mark.importtest
    def test_constants_import(self):
        """Test that constants module can be imported."""
        import pycoherent.constants
        assert pycoherent.constants.RASTER_STRIDE_BOUNDARY == 4

    @pytest.mark.importtest
    def test_exceptions_import(self):
        """Test that the error types are exposed at top level."""
        import pycoherent
        assert issubclass(pycoherent.InvalidParameterError, ValueError)
        assert issubclass(pycoherent.OutOfMemoryError, MemoryError)
        assert issubclass(pycoherent.NoModuleError, pycoherent.NoiseError)


class TestNoiseImports:
    """Test imports for the noise kernels."""

    @pytest.mark.importtest
    def test_noise_init_import(self):
        """Test noise package import and its public functions."""
        import pycoherent.noise
        for name in ('int_hash', 'value_noise', 'gradient_noise',
                     'gradient_coherent_noise', 'make_int32_range',
                     'linear_interp', 'cubic_interp', 's_curve3', 's_curve5'):
            assert hasattr(pycoherent.noise, name)

    @pytest.mark.importtest
    def test_noise_vectorized_import(self):
        """Test array kernels import."""
        import pycoherent.noise.vectorized
        assert hasattr(pycoherent.noise.vectorized, 'gradient_coherent_noise_array')


class TestModuleImports:
    """Test imports for noise modules."""

    @pytest.mark.importtest
    def test_module_init_import(self):
        """Test that every module class is exported."""
        import pycoherent.module
        for name in ('Module', 'Perlin', 'Billow', 'Voronoi',
                     'Blend', 'RotatePoint', 'Turbulence'):
            assert hasattr(pycoherent.module, name)


class TestRasterImports:
    """Test imports for the raster package."""

    @pytest.mark.importtest
    def test_raster_init_import(self):
        """Test raster package import."""
        import pycoherent.raster
        assert hasattr(pycoherent.raster, 'NoiseMap')
        assert hasattr(pycoherent.raster, 'NoiseMapBuilderPlane')


class TestMiscImports:
    """Test imports for misc utilities."""

    @pytest.mark.importtest
    def test_misc_init_import(self):
        """Test misc package import."""
        import pycoherent.misc
        assert callable(pycoherent.misc.save_noise_map_png)
        assert callable(pycoherent.misc.save_noise_map_numpy)


class TestCLIImports:
    """Test imports for CLI modules."""

    @pytest.mark.importtest
    def test_cli_init_import(self):
        """Test CLI package import."""
        import pycoherent.cli
        assert pycoherent.cli is not None

    @pytest.mark.importtest
    def test_cli_lazy_attribute(self):
        """Test that CLI commands resolve lazily from the package."""
        import pycoherent.cli
        from pycoherent.cli.build_commands import build_noise_map
        assert pycoherent.cli.build_noise_map is build_noise_map

    @pytest.mark.importtest
    def test_cli_unknown_attribute(self):
        """Test that unknown CLI attributes raise AttributeError."""
        import pycoherent.cli
        with pytest.raises(AttributeError):
            pycoherent.cli.not_a_command
