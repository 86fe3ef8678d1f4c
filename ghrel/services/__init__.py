# SPDX-License-Identifier: MIT
"""Application services for ghrel.

Services implement the release pipeline, coordinating between the domain
layer (core/) and infrastructure (git/, platform/, github/).
"""
