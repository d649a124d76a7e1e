# expr_graph/ops/transcendental.py
# Elementwise transforms for apply_unary(): plain float -> float functions.
import numpy as np

def tanh(x):
    """
    Hyperbolic tangent written out through exponentials:
        tanh(x) = (e^x - e^-x) / (e^x + e^-x)

    Large |x| overflows e^x; np.tanh is used there so the result saturates at +-1
    instead of turning into inf/inf = nan.
    """
    x = float(x)
    if abs(x) > 20.0:
        return float(np.tanh(x))
    ep, em = np.exp(x), np.exp(-x)
    return float((ep - em) / (ep + em))

def exp(x):
    return float(np.exp(x))

def relu(x):
    return float(np.maximum(x, 0.0))

def sigmoid(x):
    """
    Logistic function 1 / (1 + e^-x).

    For x < 0 the equivalent e^x / (1 + e^x) is used so e^-x never overflows.
    """
    x = float(x)
    if x >= 0.0:
        return float(1.0 / (1.0 + np.exp(-x)))
    ex = np.exp(x)
    return float(ex / (1.0 + ex))
