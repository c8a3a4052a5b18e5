"""Pinned response-signing public keys, one per environment.

The operator holds the matching private keys. Rotating a key means shipping
a new SDK release.
"""

from types import MappingProxyType

PRODUCTION_PUBLIC_KEY = """-----BEGIN PUBLIC KEY-----
MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEA3IvM0FZNsb3wa9A3L21F
Gw4gbog8K9K0rBMIUYmQRtZeXfGBFEe8Xwm73ArI94sZCig6x0j4+246JKQUIRN+
DXSF8ZhQGB4mCjmlu33sobWhYH2coTa6sSkTKUqyLUqCUNjd1NMM50xoiAFoQpWE
trNhoao+vfjasWdRmZKSYcOtwx6qta6qACV2PdQNHbNwI3kmcmojWRhErPluFrnh
CHMnysu8G0bLWkdMAIxmRY5AngyNhKbPmbIoAohgMlzRkPtALulaT6/e+hSy3VcA
GM7t2noPM0xlFeX4mnBjTwdhigEuAsUF15co72QMEXF2o0zsVtrrhe4V7yN2Ygas
CwIDAQAB
-----END PUBLIC KEY-----
"""

STAGING_PUBLIC_KEY = """-----BEGIN PUBLIC KEY-----
MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEAjmYzZ2jDAo6z3ZYkXLYI
0Vnhceggx49R3cMXZDCxHiim8sFGFRE8eX1w+AA9QNHzZLYDXFLy2QUTuRzn8dAf
t+HyzgzzNdTjjZ5gNm+DFiHXBDhq978FuRLZJoRL+sy+FjnX7TaSxxbEMpHAumOe
nUi9QF7R+GhG2JwKEVDzcGr2zHj3xlYV3y9f00JkAoyIIyDspxUkGrn3d4bCXw7E
Pv3DmOPVtf2V+VXEECzfoflEvtv6C35r20n5p491Ad1lmC03C598/cB1a379h5tG
UXdYfE3ElbQ+T8j/I9ulzMwIEkZWJXN6WR+FKNKnS7VG5055939NQM4kNMN3sW32
XQIDAQAB
-----END PUBLIC KEY-----
"""

DEVELOPMENT_PUBLIC_KEY = """-----BEGIN PUBLIC KEY-----
MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEAtmF1BHpoNZ2zRRDU+hUu
JOigJGmQXMRp4lpehbvKcQ1NPRAbjgWTGozp0yEPlm5PPOPq5wdRtg4b5TvdgsEo
1z0EMn4OSuvZgLl69txGcFtZZkFlyF0g5n7RDD7RUtNA1Be9BQb0Mbfa63N8iluq
GCJMA6fmxMxCOU/cnrNV3JGBuEIdNIJSEfxqlbkeb+J9L8lSymPZ9dRPnYz7Mt7q
IQwxA7zvswJ8/ptqxj4xMg0mMJCwp2O5JYeb9XTxxReXa9iknKD2Z655Ey2C9olN
dEhoGOx7f1c43Ioee2Zq2Dmrn+YS77XEf1rRbkeU67lKV64heUUEdtDgvuOwR5de
/wIDAQAB
-----END PUBLIC KEY-----
"""

# Keyed by Environment value
TRUST_ANCHORS = MappingProxyType({
    "production": PRODUCTION_PUBLIC_KEY,
    "staging": STAGING_PUBLIC_KEY,
    "development": DEVELOPMENT_PUBLIC_KEY,
})
