"""Browser launcher gateway.

Import from submodules:
- abc: BrowserLauncher
- real: RealBrowserLauncher
- fake: FakeBrowserLauncher
"""
