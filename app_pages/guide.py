# app_pages/guide.py

import streamlit as st

def guide_main():
    st.title("📘 Position Sizing FAQ")
    st.caption("What each calculator does, and how the numbers are derived.")

    st.markdown("""
## Which calculator should I use?

| Calculator | You give it | It answers |
|---|---|---|
| **Total Risk %** | account value, % of account to risk, entry, stop (+ optional max positions) | how many shares so a stop-out costs exactly that % |
| **Dollar Risk** | a dollar amount to risk, entry, stop (+ optional account size) | how many shares so a stop-out costs exactly that amount |
| **Position %** | account value, % of account to put in the position, entry, stop | how many shares that allocation buys, and what it risks |

---

## Long or Short?
- **Entry above stop** → Long Position (you profit if price rises)
- **Entry below stop** → Short Position (you profit if price falls)
- **Entry equal to stop** → rejected. There is no risk per share to size against.

---

## The formulas

**Risk per share** = |entry − stop|

### Total Risk %
- Dollars risked = account × risk% ÷ 100
- Max shares = dollars risked ÷ risk per share
- With **max positions**: allotment = account ÷ max positions, and
  max shares = the smaller of the risk-based count and allotment ÷ entry
- Trade risk % = risk per share ÷ entry × 100
- Targets: **1R / 2R / 3R** = entry ± 1, 2, 3 × risk per share

### Dollar Risk
- Max shares = dollar risk ÷ risk per share
- Position % of account = position size ÷ account size × 100 (only if you enter an account size)

### Position %
- Allocation = account × position% ÷ 100
- Max shares = allocation ÷ entry
- Dollars risked = max shares × risk per share
- Trade risk % = dollars risked ÷ account × 100

---

## Notes
- Share counts are **fractional** (4 decimals). Round down to what your broker allows.
- Results update as you type. Press **Calculate** to save a result to **Recent Results**.
- Recent Results live only in this browser session. Use **CSV** to keep them.
- **Use last close** fills the entry price from the latest daily close (yfinance). It never changes the math.
""")
