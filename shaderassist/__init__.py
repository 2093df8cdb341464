"""ShaderAssist - recompile GLSL shaders to SPIR-V whenever they change."""

__version__ = "0.1.0"
