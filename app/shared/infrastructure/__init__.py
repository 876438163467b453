"""
Infrastructure layer package for the PlantsByJulie API.
Provides the Supabase Storage service used for catalog images.
"""

__all__ = ["storage"]
