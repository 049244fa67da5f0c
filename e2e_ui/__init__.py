"""Browser end-to-end suite for the ParaBank demo and the storefront sample app."""
