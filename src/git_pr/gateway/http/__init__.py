"""HTTP transport gateway.

Import from submodules:
- abc: HttpClient
- types: HttpResponse
- real: RealHttpClient
- fake: FakeHttpClient
"""
