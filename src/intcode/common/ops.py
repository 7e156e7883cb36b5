# Arithmetic
ADD = 1  # M[A1] +  M[A2] -> M[A3]
MUL = 2  # M[A1] *  M[A2] -> M[A3]

# Control
HLT = 99  # stop execution

NAMES = {
    ADD: 'add',
    MUL: 'mul',
    HLT: 'hlt'
}
