"""Runtime data model: values, bindings, environments and suspensions.

Import from the submodules directly; jam.ast depends on
jam.types.constants and jam.types.prim_fun, so this package stays empty to
keep those imports free of cycles.
"""
