#!/usr/bin/env python
# coding: utf-8

# # Silhouettes Of Linked Twist Map Orbits
# The linked twist map on the unit torus is
# 
# $$x_{n+1} = x_n + r\,y_n(1-y_n) \bmod 1,\qquad y_{n+1} = y_n + r\,x_{n+1}(1-x_{n+1}) \bmod 1.$$
# 
# Orbits of this map are a standard benchmark in topological data analysis: small values of $r$ leave visible holes in the orbit, larger values fill the torus. This notebook samples orbits for two nearby values of $r$, summarizes the dimension-1 persistent homology of each orbit's alpha complex as a weighted silhouette $\phi(t) = \sum_p w(p)\Lambda_p(t) / \sum_p w(p)$ with $w(p) = d - b$, and draws the two families of silhouettes on top of each other.

# In[ ]:


import numpy as np
import matplotlib.pyplot as plt
import orbit_silhouettes as osil


# First, look at a single orbit for each parameter:

# In[ ]:


fig, axes = plt.subplots(1, 2, figsize=(10, 5))
for ax, r in zip(axes, (1.9, 2.1)):
    X = osil.sample_orbit(num_pts=1000, r=r, rng=0)
    osil.viz.plot_orbit(X, ax=ax, title=f"r = {r}", show=False)
plt.show()


# One orbit, its persistence, and its silhouette:

# In[ ]:


gen = osil.OrbitSilhouetteGenerator(osil.OrbitConfig(num_pts=1000, r=2.1))
sample = gen.generate_with_details(rng=0)
print(sample.to_text())


# $\textbf{Main computation}$: sample 10 silhouettes for each $r$, each from its own random stream, and reshape them into a long table with a prepended origin so every curve starts at $(0,0)$.

# In[ ]:


n_samples = 10  #CHOOSE: silhouettes per parameter value

samples = osil.sample_silhouettes(
    r_values=(1.9, 2.1),
    n_samples=n_samples,
    num_pts=1000,
    resolution=1000,
    seed=2024,
    verbose=True,
)

frame = osil.silhouettes_to_frame(samples)
frame.head()


# Layered line chart, one thin line per sample and the per-group mean on top:

# In[ ]:


fig = osil.viz.plot_silhouettes(frame, show_mean=True)
