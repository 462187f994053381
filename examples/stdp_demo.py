#!/usr/bin/env python3
"""
Example: Event-Driven STDP Demonstration

Shows how a StandardSTDP rule turns spike timing into weight changes, and
how a simulation loop applies the deltas to a weight matrix.
"""

import torch

from synapto import Polarity, PlasticityRegime, StandardSTDP, apply_weight_delta


def main():
    print("Event-Driven STDP Demonstration")
    print("=" * 50)

    rule = StandardSTDP.from_preset(Polarity.EXCITATORY, Polarity.EXCITATORY, eta=0.01)

    print("\nRule parameters:")
    for key, value in rule.get_diagnostics().items():
        print(f"  {key:>9} = {value}")

    # Timing window for a single synapse
    print("\n" + "-" * 50)
    print("STDP Timing Window (Δt = t_post - t_arr)")
    print("-" * 50)
    print("\n  Δt (ms) │  ΔW")
    print("  ────────┼────────")

    for delta_t in [-20, -10, -5, -2, 2, 5, 10, 20]:
        if delta_t > 0:
            # Arrival then post spike: postsynaptic trigger
            dw = rule.post_trigger(torch.tensor([float(delta_t)]), torch.tensor([0.0]))
        else:
            # Post spike then arrival: presynaptic trigger
            dw = rule.pre_trigger_hebb(torch.tensor(0.0), torch.tensor([float(-delta_t)]))

        bar_width = int(abs(dw.item()) * 20)
        bar = ("+" if dw.item() > 0 else "-") + "█" * bar_width
        print(f"  {delta_t:+4d}    │ {dw.item():+.4f}  {bar}")

    # A small projection driven by random spikes
    print("\n" + "-" * 50)
    print("Random spiking projection (20 pre → 10 post, 200 steps)")
    print("-" * 50)

    n_pre, n_post, delay = 20, 10, 2.0
    weights = torch.rand(n_post, n_pre) * 0.5
    last_arrival = torch.full((n_post, n_pre), -1e3)
    last_post = torch.full((n_post, 1), -1e3)
    initial_mean = weights.mean().item()

    for t in range(200):
        now = float(t)
        pre_fired = torch.rand(n_pre) < 0.05
        post_fired = torch.rand(n_post) < 0.05

        if pre_fired.any():
            last_arrival[:, pre_fired] = now + delay
            dw = rule.pre_trigger_hebb(last_post, last_arrival[:, pre_fired])
            update = torch.zeros_like(weights)
            update[:, pre_fired] = dw
            apply_weight_delta(weights, update, w_min=0.0, w_max=1.0)

        if post_fired.any():
            last_post[post_fired] = now
            rows = post_fired.nonzero(as_tuple=True)[0]
            dw = rule.post_trigger(last_post[rows].expand(-1, n_pre), last_arrival[rows])
            update = torch.zeros_like(weights)
            update[rows] = dw
            apply_weight_delta(weights, update, w_min=0.0, w_max=1.0)

    print(f"\n  Mean weight: {initial_mean:.4f} → {weights.mean().item():.4f}")

    anti = rule.with_regime(PlasticityRegime.ANTI_HEBBIAN)
    print(f"\nSame window, anti-Hebbian regime: {anti!r}")
    print("\nDone!")


if __name__ == "__main__":
    main()
