"""Page objects: locator bundles with thin actions over a borrowed Playwright page."""
