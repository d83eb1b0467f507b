import streamlit as st

st.set_page_config(page_title="Methodology", layout="wide")
st.title("Methodology")

st.markdown(
    r"""
### Offered traffic

- From busy-hour usage (call duration in minutes):
  \[
  A = \frac{\text{users} \cdot \text{duration} \cdot \text{concurrent\_calls}}{60}
  \]

### Erlang B

- Blocking probability for \(n\) channels:
  \[
  B(A, n) = \frac{\frac{A^n}{n!}}{\sum_{k=0}^{n}\frac{A^k}{k!}}
  \]

- Computed with the inverse recurrence (no factorials, no overflow):
  \[
  I_0 = 1, \qquad I_n = 1 + I_{n-1}\cdot\frac{n}{A}, \qquad B(A, n) = \frac{1}{I_n}
  \]

### Sizing logic

- Scan \(n = 1, 2, \dots, n_{max}\) and return the first \(n\) with \(B(A, n) \le\) target.
  Blocking never increases with \(n\), so the first hit is the minimum.
- No hit within \(n_{max}\) means the target cannot be met within the bound.
- E1 trunks:
  \[
  \text{trunks} = \left\lceil \frac{n}{30} \right\rceil
  \]
"""
)
