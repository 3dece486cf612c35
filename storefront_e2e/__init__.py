# ABOUTME: Storefront end-to-end test framework
# ABOUTME: Environment resolution, auth bootstrap, page objects and analytics helpers

__version__ = "0.1.0"
