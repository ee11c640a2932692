"""
Business/service layer

Every public service method returns a ServiceResponse. Repository errors
are logged and turned into a generic 500 envelope here, so views only ever
deal with envelopes.
"""
