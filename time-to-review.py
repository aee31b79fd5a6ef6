#!/usr/bin/env python3
"""
Time to Review
Estimates how long a pull request takes to review and labels it accordingly.
"""

from time_to_review.action import main


if __name__ == "__main__":
    main()
