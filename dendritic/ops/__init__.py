"""Binary, unary, scalar and aggregate operations on arrays."""